"""
Tests for the entity model.
"""

import pytest
from mystery_game.entities import (
    DEFAULT_CHAMBER_NAMES,
    DEFAULT_HIDEOUT_NAMES,
    DEFAULT_PARTICIPANT_NAMES,
    Entity,
    EntityKind,
    make_chambers,
    make_hideouts,
    make_participants,
)
from mystery_game.errors import InvalidEntityError


class TestDisplayLabel:
    """Each kind renders a kind-prefixed label."""

    def test_hideout_label(self):
        assert Entity(EntityKind.HIDEOUT, "Under the rug").display_label() == "Hideout: Under the rug"

    def test_chamber_label(self):
        assert Entity(EntityKind.CHAMBER, "Kitchen").display_label() == "Chamber: Kitchen"

    def test_participant_label(self):
        assert Entity(EntityKind.PARTICIPANT, "Alice").display_label() == "Participant: Alice"


class TestEntityConstruction:
    """Test entity invariants."""

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidEntityError, match="non-empty"):
            Entity(EntityKind.HIDEOUT, "")

    def test_whitespace_name_rejected(self):
        with pytest.raises(InvalidEntityError):
            Entity(EntityKind.CHAMBER, "   ")

    def test_invalid_entity_error_is_value_error(self):
        with pytest.raises(ValueError):
            Entity(EntityKind.PARTICIPANT, "")

    def test_new_participant_has_no_clues(self):
        assert make_participants(["Alice"])[0].clues == []

    def test_participants_do_not_share_clue_lists(self):
        alice, bob = make_participants(["Alice", "Bob"])
        alice.receive_clue("Kitchen")
        assert bob.clues == []


class TestReceiveClue:
    """Clues are kept in the order they were received."""

    def test_clues_keep_insertion_order(self):
        alice = make_participants(["Alice"])[0]
        for clue in ["Kitchen", "Bob", "Under the bed"]:
            alice.receive_clue(clue)
        assert alice.clues == ["Kitchen", "Bob", "Under the bed"]

    def test_only_participants_receive_clues(self):
        hideout = make_hideouts(["In the closet"])[0]
        with pytest.raises(InvalidEntityError, match="Only participants"):
            hideout.receive_clue("Kitchen")


class TestCatalogs:
    """Test the default catalogs."""

    def test_six_participants(self):
        assert DEFAULT_PARTICIPANT_NAMES == ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank"]

    def test_six_hideouts(self):
        assert len(DEFAULT_HIDEOUT_NAMES) == 6
        assert "Under the rug" in DEFAULT_HIDEOUT_NAMES

    def test_nine_chambers(self):
        assert len(DEFAULT_CHAMBER_NAMES) == 9
        assert "Basement" in DEFAULT_CHAMBER_NAMES

    def test_factories_set_kind(self):
        assert all(e.kind is EntityKind.PARTICIPANT for e in make_participants(DEFAULT_PARTICIPANT_NAMES))
        assert all(e.kind is EntityKind.HIDEOUT for e in make_hideouts(DEFAULT_HIDEOUT_NAMES))
        assert all(e.kind is EntityKind.CHAMBER for e in make_chambers(DEFAULT_CHAMBER_NAMES))
