import random
from collections import Counter

from turngochi.attributes import Stat
from turngochi.events import EventKind, RandomEvent
from turngochi.simulation import PetState


def test_trigger_decreases_chosen_stat(stub_rng):
    pet = PetState("Rex")
    result = RandomEvent(stub_rng).trigger(pet)
    assert result.kind is EventKind.HUNGRY
    assert pet.hunger.get() == 40
    assert (pet.happiness.get(), pet.energy.get(), pet.cleanliness.get()) == (50, 50, 50)
    assert "Rex got hungry" in result.message("Rex")


def test_events_never_touch_health():
    assert Stat.HEALTH not in {kind.stat for kind in EventKind}


def test_events_are_roughly_uniform():
    event = RandomEvent(random.Random(1234))
    counts = Counter(event.trigger(PetState()).kind for _ in range(4000))
    assert set(counts) == set(EventKind)
    for kind in EventKind:
        assert 850 < counts[kind] < 1150
