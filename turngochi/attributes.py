from dataclasses import dataclass
from enum import Enum

from .config import ATTRIBUTE_INITIAL, ATTRIBUTE_MIN, ATTRIBUTE_MAX


class Stat(Enum):
    """Names the attributes a PetState owns. Values are the attribute names."""
    HUNGER = "hunger"
    HAPPINESS = "happiness"
    ENERGY = "energy"
    CLEANLINESS = "cleanliness"
    HEALTH = "health"

    @property
    def label(self):
        return self.value.capitalize()


# Stats the aliveness check and random events look at. Health is not one of them.
VITAL_STATS = (Stat.HUNGER, Stat.HAPPINESS, Stat.ENERGY, Stat.CLEANLINESS)


@dataclass
class BoundedAttribute:
    """Integer clamped to [minimum, maximum]; every mutation clamps, nothing is rejected."""
    value: int = ATTRIBUTE_INITIAL
    minimum: int = ATTRIBUTE_MIN
    maximum: int = ATTRIBUTE_MAX

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise ValueError("minimum cannot exceed maximum.")
        self.value = self.clamp(self.value)

    def clamp(self, value: int) -> int:
        return max(self.minimum, min(self.maximum, value))

    def increase(self, delta: int) -> int:
        self.value = min(self.maximum, self.value + delta)
        return self.value

    def decrease(self, delta: int) -> int:
        self.value = max(self.minimum, self.value - delta)
        return self.value

    def set(self, value: int) -> int:
        self.value = self.clamp(value)
        return self.value

    def get(self) -> int:
        return self.value


@dataclass
class Age:
    """Turn counter. Only ever moves forward."""
    turns: int = 0

    def advance(self) -> int:
        self.turns += 1
        return self.turns

    def get(self) -> int:
        return self.turns
