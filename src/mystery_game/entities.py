"""
Entities for the Mystery Game.

Every participant, hideout and chamber is an Entity tagged with its kind.
Participants additionally collect clues, in the order they were dealt.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from mystery_game.errors import InvalidEntityError


class EntityKind(Enum):
    PARTICIPANT = "Participant"
    HIDEOUT = "Hideout"
    CHAMBER = "Chamber"


DEFAULT_PARTICIPANT_NAMES = ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank"]

DEFAULT_HIDEOUT_NAMES = [
    "Behind the curtain",
    "Under the rug",
    "In the closet",
    "Under the bed",
    "On the shelf",
    "In the drawer",
]

DEFAULT_CHAMBER_NAMES = [
    "Living room",
    "Kitchen",
    "Library",
    "Bathroom",
    "Bedroom",
    "Dining room",
    "Garage",
    "Attic",
    "Basement",
]


@dataclass
class Entity:
    """A named game entity: a participant, a hideout or a chamber."""
    kind: EntityKind
    name: str
    clues: List[str] = field(default_factory=list)  # only participants receive clues

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidEntityError(
                f"{self.kind.value} name must be a non-empty string, got {self.name!r}"
            )

    def display_label(self) -> str:
        """Kind-prefixed label, e.g. 'Hideout: Under the rug'."""
        return f"{self.kind.value}: {self.name}"

    def receive_clue(self, clue: str) -> None:
        if self.kind is not EntityKind.PARTICIPANT:
            raise InvalidEntityError(f"Only participants receive clues, not {self.display_label()}")
        self.clues.append(clue)


def _make_entities(kind: EntityKind, names: Iterable[str]) -> List[Entity]:
    return [Entity(kind=kind, name=name) for name in names]


def make_participants(names: Iterable[str]) -> List[Entity]:
    return _make_entities(EntityKind.PARTICIPANT, names)


def make_hideouts(names: Iterable[str]) -> List[Entity]:
    return _make_entities(EntityKind.HIDEOUT, names)


def make_chambers(names: Iterable[str]) -> List[Entity]:
    return _make_entities(EntityKind.CHAMBER, names)
