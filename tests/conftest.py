import io
import random

import pytest
from rich.console import Console


class StubRandom(random.Random):
    """Always draws the same number and always picks the first choice."""

    def __init__(self, number=42):
        super().__init__(0)
        self.number = number

    def randint(self, a, b):
        return self.number

    def choice(self, seq):
        return seq[0]


def _next(script):
    value = next(script)
    if isinstance(value, BaseException): raise value
    return value


class ScriptedInteraction:
    """Feeds canned choices to the game; an exception in a script is raised when reached."""

    def __init__(self, actions, games=(), answers=(), purchases=(), name="Rex"):
        self.actions = iter(actions); self.games = iter(games)
        self.answers = iter(answers); self.purchases = iter(purchases)
        self.name = name
        self.prompts = []

    def ask_name(self):
        return self.name

    def choose_action(self):
        return _next(self.actions)

    def choose_game(self):
        return _next(self.games)

    def answer(self, prompt):
        self.prompts.append(prompt)
        return _next(self.answers)

    def choose_purchase(self):
        return _next(self.purchases)


@pytest.fixture
def stub_random():
    return StubRandom


@pytest.fixture
def stub_rng():
    return StubRandom()


@pytest.fixture
def scripted():
    return ScriptedInteraction


@pytest.fixture
def quiet_console():
    return Console(file=io.StringIO(), width=100, color_system=None)
