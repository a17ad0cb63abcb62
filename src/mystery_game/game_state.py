"""
Game State Management for the Mystery Game

Rules implemented:
- One participant, one hideout and one chamber are chosen at random as the
  secret combination before anything is dealt
- Every other name is shuffled and dealt as clues, up to three per participant,
  filling participants in catalog order
- Any pool entry whose name matches a secret value is discarded, never dealt
- Participants take turns in a fixed order; a guess must match all three
  secret values exactly (case-sensitive, no trimming) to win
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

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
from mystery_game.errors import GameSetupError

logger = logging.getLogger(__name__)

CLUES_PER_PARTICIPANT = 3
DIE_FACES = 6


@dataclass(frozen=True)
class SecretCombination:
    """The hidden participant/hideout/chamber triple."""
    participant: str
    hideout: str
    chamber: str

    def as_mapping(self) -> dict:
        return {
            EntityKind.PARTICIPANT.value: self.participant,
            EntityKind.HIDEOUT.value: self.hideout,
            EntityKind.CHAMBER.value: self.chamber,
        }

    def values(self) -> Set[str]:
        return {self.participant, self.hideout, self.chamber}


@dataclass(frozen=True)
class Guess:
    """A participant's guess, fields kept exactly as typed."""
    participant: str
    hideout: str
    chamber: str


@dataclass
class GuessRecord:
    guesser: str
    guess: Guess
    correct: bool


def select_secret(
    participants: Sequence[Entity],
    hideouts: Sequence[Entity],
    chambers: Sequence[Entity],
    rng: random.Random,
) -> SecretCombination:
    """Pick one name uniformly at random from each catalog."""
    for label, catalog in (
        ("participant", participants),
        ("hideout", hideouts),
        ("chamber", chambers),
    ):
        if not catalog:
            raise GameSetupError(f"Cannot choose a secret {label} from an empty catalog")

    return SecretCombination(
        participant=rng.choice(participants).name,
        hideout=rng.choice(hideouts).name,
        chamber=rng.choice(chambers).name,
    )


def build_clue_pool(
    participants: Sequence[Entity],
    hideouts: Sequence[Entity],
    chambers: Sequence[Entity],
) -> List[str]:
    """Every entity name, participants first, then hideouts, then chambers."""
    return [e.name for e in participants] + [e.name for e in hideouts] + [e.name for e in chambers]


def shuffle_clue_pool(pool: Sequence[str], rng: random.Random) -> List[str]:
    """Return a uniformly shuffled copy of the pool."""
    shuffled = list(pool)
    rng.shuffle(shuffled)
    return shuffled


def deal_clues(
    participants: Sequence[Entity],
    hideouts: Sequence[Entity],
    chambers: Sequence[Entity],
    secret: SecretCombination,
    rng: random.Random,
    clues_per_participant: int = CLUES_PER_PARTICIPANT,
) -> int:
    """
    Shuffle the clue pool and deal it to participants in catalog order.

    The pool is walked once. Entries equal to any secret value are discarded.
    Each participant is filled up to ``clues_per_participant`` before moving on
    to the next, so an exhausted pool leaves later participants short.

    Returns:
        The total number of clues dealt.
    """
    pool = shuffle_clue_pool(build_clue_pool(participants, hideouts, chambers), rng)
    withheld = secret.values()

    index = 0
    dealt = 0
    for participant in participants:
        while len(participant.clues) < clues_per_participant and index < len(pool):
            clue = pool[index]
            index += 1
            if clue in withheld:
                continue
            participant.receive_clue(clue)
            dealt += 1
        logger.debug("Dealt %d clue(s) to %s", len(participant.clues), participant.name)

    return dealt


def parse_guess(line: str) -> Optional[Guess]:
    """
    Parse 'Participant,Hideout,Chamber' into a Guess.

    Trailing empty fields are ignored, so 'a,b,c,' is a valid guess while
    'a,b,' is not. Fields are not trimmed. Returns None unless exactly three
    fields remain.
    """
    parts = line.split(",")
    while parts and parts[-1] == "":
        parts.pop()
    if len(parts) != 3:
        return None
    return Guess(participant=parts[0], hideout=parts[1], chamber=parts[2])


def evaluate_guess(guess: Guess, secret: SecretCombination) -> bool:
    """True only if all three fields match the secret exactly."""
    return (
        guess.participant == secret.participant and
        guess.hideout == secret.hideout and
        guess.chamber == secret.chamber
    )


@dataclass
class GameState:
    """Main game state manager."""
    participants: List[Entity] = field(default_factory=list)
    hideouts: List[Entity] = field(default_factory=list)
    chambers: List[Entity] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    secret: Optional[SecretCombination] = field(default=None, repr=False)
    current_participant_index: int = 0
    turn_number: int = 1
    game_over: bool = False
    winner: Optional[str] = None
    guess_history: List[GuessRecord] = field(default_factory=list)

    def setup_game(self) -> None:
        """Choose the secret combination, then deal clues."""
        if self.secret is not None:
            raise GameSetupError("Game is already set up; the secret combination cannot change")
        if not self.participants:
            raise GameSetupError("At least one participant is required")

        self.secret = select_secret(self.participants, self.hideouts, self.chambers, self.rng)
        logger.debug("Secret combination: %s", self.secret.as_mapping())

        dealt = deal_clues(self.participants, self.hideouts, self.chambers, self.secret, self.rng)
        logger.debug("Dealt %d clues to %d participants", dealt, len(self.participants))

    def get_current_participant(self) -> Entity:
        """Get the participant whose turn it is."""
        return self.participants[self.current_participant_index]

    def next_turn(self) -> None:
        """Advance to the next participant, wrapping around."""
        self.current_participant_index = (self.current_participant_index + 1) % len(self.participants)
        self.turn_number += 1

    def roll_die(self) -> int:
        """Roll one six-sided die."""
        return self.rng.randint(1, DIE_FACES)

    def make_guess(self, participant: Entity, guess: Guess) -> bool:
        """
        Evaluate a guess for a participant. Returns True if it solves the mystery,
        in which case the game is over and the participant is the winner.
        """
        if self.secret is None:
            raise GameSetupError("Game has not been set up yet")

        is_correct = evaluate_guess(guess, self.secret)
        self.guess_history.append(GuessRecord(guesser=participant.name, guess=guess, correct=is_correct))

        if is_correct:
            self.game_over = True
            self.winner = participant.name
        return is_correct

    def get_participant_by_name(self, name: str) -> Optional[Entity]:
        """Get a participant by their name."""
        for participant in self.participants:
            if participant.name == name:
                return participant
        return None

    def get_game_summary(self) -> str:
        """Get a summary of the current game state. Never includes the secret."""
        summary = f"=== Turn {self.turn_number} ===\n"
        summary += f"Current Participant: {self.get_current_participant().name}\n\n"

        for participant in self.participants:
            summary += f"{participant.display_label()} ({len(participant.clues)} clues)\n"

        if self.guess_history:
            last = self.guess_history[-1]
            summary += (
                f"\nLast guess: {last.guesser} guessed {last.guess.participant} "
                f"{last.guess.hideout} in the {last.guess.chamber}"
            )
            summary += " (correct)\n" if last.correct else " (wrong)\n"

        return summary


def create_game(
    participant_names: Optional[Sequence[str]] = None,
    hideout_names: Optional[Sequence[str]] = None,
    chamber_names: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> GameState:
    """
    Build and set up a game.

    Args:
        participant_names: Participant names (default: the six classic participants)
        hideout_names: Hideout names (default: the six hideouts)
        chamber_names: Chamber names (default: the nine chambers)
        rng: Random source to use; takes precedence over ``seed``
        seed: Seed for a fresh random source when ``rng`` is not given

    Raises:
        GameSetupError: if any catalog is empty
        InvalidEntityError: if any name is empty
    """
    if participant_names is None:
        participant_names = DEFAULT_PARTICIPANT_NAMES
    if hideout_names is None:
        hideout_names = DEFAULT_HIDEOUT_NAMES
    if chamber_names is None:
        chamber_names = DEFAULT_CHAMBER_NAMES

    for label, names in (
        ("participants", participant_names),
        ("hideouts", hideout_names),
        ("chambers", chamber_names),
    ):
        if not names:
            raise GameSetupError(f"The {label} catalog must not be empty")

    game = GameState(
        participants=make_participants(participant_names),
        hideouts=make_hideouts(hideout_names),
        chambers=make_chambers(chamber_names),
        rng=rng if rng is not None else random.Random(seed),
    )
    game.setup_game()
    return game
