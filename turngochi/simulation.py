"""
Pet state and the turn cycle.

A turn is: apply the player's action, then, if the pet is still alive,
apply one random event and advance its age. A pet whose hunger, happiness,
energy or cleanliness reaches zero dies and the game ends.
"""
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Protocol

from .attributes import Age, BoundedAttribute, Stat, VITAL_STATS
from .config import (
    DEFAULT_NAME, FEED_HUNGER_DELTA, PLAY_ENERGY_COST,
    SLEEP_ENERGY_GAIN, SLEEP_HUNGER_GAIN, CLEAN_CLEANLINESS_GAIN,
)
from .economy import Economy, Purchase
from .events import EventResult, RandomEvent
from .minigames import GameKind, Outcome, get_game
from .persistence import PetRecord


class Action(Enum):
    FEED = "1"
    PLAY = "2"
    SLEEP = "3"
    CLEAN = "4"
    STATUS = "5"
    SHOP = "6"
    QUIT = "7"

    @classmethod
    def parse(cls, choice) -> Optional["Action"]:
        try:
            return cls(str(choice).strip())
        except ValueError:
            return None


class Phase(Enum):
    ALIVE = "alive"
    DEAD = "dead"


# Shop item -> attribute it boosts. Medicine goes to cleanliness, not health.
SHOP_WIRING = {
    Purchase.FOOD: Stat.HUNGER,
    Purchase.MEDICINE: Stat.CLEANLINESS,
    Purchase.TOY: Stat.HAPPINESS,
}


class Interaction(Protocol):
    """Everything the game asks of the player: a name, each turn's action and the sub-choices some actions need."""

    def ask_name(self) -> str: ...

    def choose_action(self) -> str: ...

    def choose_game(self) -> str: ...

    def answer(self, prompt: str) -> int: ...

    def choose_purchase(self) -> str: ...


@dataclass
class PetState:
    name: str = DEFAULT_NAME
    hunger: BoundedAttribute = field(default_factory=BoundedAttribute)
    happiness: BoundedAttribute = field(default_factory=BoundedAttribute)
    energy: BoundedAttribute = field(default_factory=BoundedAttribute)
    cleanliness: BoundedAttribute = field(default_factory=BoundedAttribute)
    health: BoundedAttribute = field(default_factory=BoundedAttribute)  # tracked, never read by the game rules
    age: Age = field(default_factory=Age)
    economy: Economy = field(default_factory=Economy)

    def attribute(self, stat: Stat) -> BoundedAttribute:
        return getattr(self, stat.value)

    def is_alive(self) -> bool:
        return all(self.attribute(stat).get() > 0 for stat in VITAL_STATS)

    def snapshot(self) -> Dict[str, int]:
        data = {stat.label: self.attribute(stat).get() for stat in Stat}
        data["Money"] = self.economy.balance(); data["Age"] = self.age.get()
        return data

    def to_record(self) -> PetRecord:
        return PetRecord(
            self.name, self.hunger.get(), self.happiness.get(), self.energy.get(),
            self.cleanliness.get(), self.age.get(), self.economy.balance(),
        )

    @classmethod
    def from_record(cls, record: PetRecord) -> "PetState":
        """Build a pet from a saved record; out-of-range values are clamped on the way in."""
        state = cls(record.name or DEFAULT_NAME)
        state.hunger.set(record.hunger); state.happiness.set(record.happiness)
        state.energy.set(record.energy); state.cleanliness.set(record.cleanliness)
        state.age = Age(max(0, record.age))
        state.economy = Economy(record.money)
        return state


@dataclass
class TurnResult:
    action: Optional[Action]
    messages: List[str] = field(default_factory=list)
    event: Optional[EventResult] = None
    game: Optional[Outcome] = None
    status: Optional[Dict[str, int]] = None
    age: int = 0
    phase: Phase = Phase.ALIVE

    @property
    def finished(self) -> bool:
        return self.action is Action.QUIT or self.phase is Phase.DEAD


class Simulation:
    def __init__(self, state: PetState | None = None, rng: random.Random | None = None):
        self.state = state or PetState()
        self.rng = rng or random.Random()
        self.random_event = RandomEvent(self.rng)
        self.phase = Phase.ALIVE if self.state.is_alive() else Phase.DEAD

    def is_alive(self) -> bool:
        return self.state.is_alive()

    def apply_random_event(self) -> EventResult:
        return self.random_event.trigger(self.state)

    def advance_age(self) -> int:
        return self.state.age.advance()

    def apply_action(self, action: Optional[Action], interaction: Interaction) -> TurnResult:
        """Apply the action alone, without the event/age/death step that follows it."""
        pet = self.state; result = TurnResult(action, age=pet.age.get(), phase=self.phase)
        if action is None:
            result.messages.append("[bold red]Invalid option. Try again.[/bold red]")
        elif action is Action.FEED:
            # Feeding lowers hunger. Kept as is even though it reads backwards.
            pet.hunger.decrease(FEED_HUNGER_DELTA)
            result.messages.append(f"[green]You fed {pet.name}.[/green]")
        elif action is Action.PLAY:
            game = get_game(GameKind.parse(interaction.choose_game()))
            result.game = game.play(pet.happiness, pet.economy, interaction.answer, self.rng)
            pet.energy.decrease(PLAY_ENERGY_COST)
            result.messages.append(result.game.message)
        elif action is Action.SLEEP:
            pet.energy.increase(SLEEP_ENERGY_GAIN); pet.hunger.increase(SLEEP_HUNGER_GAIN)
            result.messages.append(f"[purple]{pet.name} slept and regained energy.[/purple]")
        elif action is Action.CLEAN:
            pet.cleanliness.increase(CLEAN_CLEANLINESS_GAIN)
            result.messages.append(f"[cyan]You cleaned {pet.name}.[/cyan]")
        elif action is Action.STATUS:
            result.status = pet.snapshot()
        elif action is Action.SHOP:
            item = Purchase.parse(interaction.choose_purchase())
            if item is None:
                result.messages.append("[bold red]Invalid shop option. Try again.[/bold red]")
            else:
                result.messages.append(pet.economy.buy(item, pet.attribute(SHOP_WIRING[item])).message)
        elif action is Action.QUIT:
            result.messages.append("[bold blue]Goodbye![/bold blue]")
        return result

    def play_turn(self, action: Optional[Action], interaction: Interaction) -> TurnResult:
        if self.phase is Phase.DEAD:
            raise RuntimeError(f"{self.state.name} is dead; no more turns can be played.")
        result = self.apply_action(action, interaction)
        if action is None or action is Action.QUIT:
            return result
        if self.is_alive():
            result.event = self.apply_random_event()
            result.messages.append(result.event.message(self.state.name))
            result.age = self.advance_age()
        else:
            self.phase = result.phase = Phase.DEAD
            result.messages.append(f"[bold red on white] !!! {self.state.name} has passed away. RIP. !!! [/bold red on white]")
        return result
