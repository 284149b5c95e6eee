import random
from enum import Enum
from typing import NamedTuple

from .attributes import Stat
from .config import EVENT_PENALTY


class EventKind(Enum):
    HUNGRY = Stat.HUNGER
    SAD = Stat.HAPPINESS
    TIRED = Stat.ENERGY
    DIRTY = Stat.CLEANLINESS

    @property
    def stat(self) -> Stat:
        return self.value


EVENT_MESSAGES = {
    EventKind.HUNGRY: "[yellow]{name} got hungry.[/yellow]",
    EventKind.SAD: "[yellow]{name} is feeling sad.[/yellow]",
    EventKind.TIRED: "[yellow]{name} is tired.[/yellow]",
    EventKind.DIRTY: "[yellow]{name} got dirty.[/yellow]",
}


class EventResult(NamedTuple):
    kind: EventKind
    penalty: int
    value: int

    def message(self, name: str) -> str:
        return EVENT_MESSAGES[self.kind].format(name=name)


class RandomEvent:
    """Each turn, knocks one of the four vital stats down by a fixed penalty."""

    kinds = tuple(EventKind)

    def __init__(self, rng: random.Random | None = None, penalty: int = EVENT_PENALTY):
        self.rng = rng or random.Random()
        self.penalty = penalty

    def trigger(self, state) -> EventResult:
        kind = self.rng.choice(self.kinds)
        value = state.attribute(kind.stat).decrease(self.penalty)
        return EventResult(kind, self.penalty, value)
