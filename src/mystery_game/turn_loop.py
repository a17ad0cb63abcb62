"""
Turn loop for the Mystery Game.

Each turn has two prompts: a roll command, then a guess. Input that is not
'roll' re-prompts the same participant. A wrong or malformed guess passes the
turn to the next participant; a correct guess ends the game.
"""

import logging
import sys
from enum import Enum
from typing import Callable, Optional, TextIO

from mystery_game.game_state import GameState, parse_guess

logger = logging.getLogger(__name__)

ROLL_COMMAND = "roll"
GUESS_FORMAT_HINT = "Guesses need three comma-separated parts: Participant,Hideout,Chamber"


class TurnPhase(Enum):
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_GUESS = "awaiting_guess"
    TERMINATED = "terminated"


class TurnLoop:
    """Drives a set-up GameState from line-oriented input."""

    def __init__(
        self,
        game: GameState,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ):
        self.game = game
        self.input_func = input_func if input_func is not None else input
        self.output = output if output is not None else sys.stdout
        self.phase = TurnPhase.TERMINATED if game.game_over else TurnPhase.AWAITING_ROLL
        self.last_roll: Optional[int] = None

    def _say(self, text: str) -> None:
        self.output.write(text + "\n")
        self.output.flush()

    def prompt(self) -> None:
        """Write the prompt for the current phase."""
        participant = self.game.get_current_participant()
        if self.phase is TurnPhase.AWAITING_ROLL:
            if participant.clues:
                self._say(f"{participant.name}'s clues: {', '.join(participant.clues)}")
            self._say(f"{participant.name}'s turn. Type '{ROLL_COMMAND}' to roll the dice:")
        elif self.phase is TurnPhase.AWAITING_GUESS:
            self._say("Make your guess (format: Participant,Hideout,Chamber):")

    def handle_line(self, line: str) -> TurnPhase:
        """Apply one line of input and return the resulting phase."""
        if self.phase is TurnPhase.AWAITING_ROLL:
            self._handle_roll(line)
        elif self.phase is TurnPhase.AWAITING_GUESS:
            self._handle_guess(line)
        return self.phase

    def _handle_roll(self, line: str) -> None:
        if line.lower() != ROLL_COMMAND:
            logger.debug("Ignoring %r while waiting for a roll", line)
            return

        self.last_roll = self.game.roll_die()
        self._say(f"You rolled a {self.last_roll}")
        self.phase = TurnPhase.AWAITING_GUESS

    def _handle_guess(self, line: str) -> None:
        participant = self.game.get_current_participant()
        guess = parse_guess(line)

        if guess is None:
            logger.debug("Malformed guess from %s: %r", participant.name, line)
            self._say(GUESS_FORMAT_HINT)
        elif self.game.make_guess(participant, guess):
            self._say(f"Congratulations {participant.name}! You solved the mystery!")
            self.phase = TurnPhase.TERMINATED
            return
        else:
            self._say("Wrong guess. Try again.")

        self.game.next_turn()
        self.phase = TurnPhase.AWAITING_ROLL

    def run(self) -> Optional[str]:
        """
        Play until someone solves the mystery.

        Returns:
            The winner's name, or None if input ran out first.
        """
        while self.phase is not TurnPhase.TERMINATED:
            self.prompt()
            try:
                line = self.input_func()
            except EOFError:
                logger.info("Input closed on turn %d without a winner", self.game.turn_number)
                return None
            self.handle_line(line)

        return self.game.winner
