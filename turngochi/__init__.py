"""Turn-based terminal virtual pet."""
from .attributes import Age, BoundedAttribute, Stat
from .economy import Economy, Purchase
from .events import EventKind, RandomEvent
from .minigames import ChallengeGame, GameKind
from .persistence import PetRecord, load_record, save_record
from .simulation import Action, Phase, PetState, Simulation

__version__ = "0.1.0"
