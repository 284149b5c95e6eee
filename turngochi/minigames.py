"""
Mini-games played with the pet.

Both games share the same stakes (win: happiness up and a coin reward;
lose: happiness down) and only differ in how the challenge is made and
checked, so each is a ChallengeGame built from a generator and a verifier.
"""
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, NamedTuple

from .attributes import BoundedAttribute
from .config import (
    GAME_WIN_HAPPINESS, GAME_LOSS_HAPPINESS, GAME_REWARD,
    GUESS_LOW, GUESS_HIGH, OPERAND_LOW, OPERAND_HIGH,
)


class GameKind(Enum):
    GUESSING = "1"
    ARITHMETIC = "2"

    @classmethod
    def parse(cls, choice):
        """Choice 1 is the guessing game; anything else falls through to arithmetic."""
        return cls.GUESSING if str(choice).strip() == cls.GUESSING.value else cls.ARITHMETIC


class Challenge(NamedTuple):
    prompt: str
    solution: int


class Outcome(NamedTuple):
    kind: GameKind
    won: bool
    answer: int
    solution: int
    happiness_delta: int
    reward: int

    @property
    def message(self) -> str:
        if self.won:
            return f"[bold green]Correct! You earned {self.reward} coins.[/bold green]"
        return f"[bold red]Sorry, the answer was {self.solution}. Better luck next time![/bold red]"


def _guessing_challenge(rng: random.Random) -> Challenge:
    secret = rng.randint(GUESS_LOW, GUESS_HIGH)
    return Challenge(f"Guess the number between {GUESS_LOW} and {GUESS_HIGH}", secret)


def _arithmetic_challenge(rng: random.Random) -> Challenge:
    a = rng.randint(OPERAND_LOW, OPERAND_HIGH); b = rng.randint(OPERAND_LOW, OPERAND_HIGH)
    return Challenge(f"What is {a} + {b}?", a + b)


def _exact_match(challenge: Challenge, answer: int) -> bool:
    return answer == challenge.solution


@dataclass(frozen=True)
class ChallengeGame:
    kind: GameKind
    title: str
    generate: Callable[[random.Random], Challenge]
    verify: Callable[[Challenge, int], bool] = _exact_match

    def play(self, happiness: BoundedAttribute, wallet, ask: Callable[[str], int],
             rng: random.Random | None = None) -> Outcome:
        """Pose one challenge through ask() and settle the stakes on happiness and wallet."""
        challenge = self.generate(rng or random.Random())
        answer = ask(challenge.prompt)
        if self.verify(challenge, answer):
            happiness.increase(GAME_WIN_HAPPINESS); wallet.earn(GAME_REWARD)
            return Outcome(self.kind, True, answer, challenge.solution, GAME_WIN_HAPPINESS, GAME_REWARD)
        happiness.decrease(GAME_LOSS_HAPPINESS)
        return Outcome(self.kind, False, answer, challenge.solution, -GAME_LOSS_HAPPINESS, 0)


GAMES = {
    GameKind.GUESSING: ChallengeGame(GameKind.GUESSING, "Guessing Game", _guessing_challenge),
    GameKind.ARITHMETIC: ChallengeGame(GameKind.ARITHMETIC, "Arithmetic Game", _arithmetic_challenge),
}


def get_game(kind: GameKind) -> ChallengeGame:
    return GAMES[kind]
