"""
Save/load of the pet to a plain text file.

Layout is one field per line, in a fixed order and without a header:
name, hunger, happiness, energy, cleanliness, age, money. Failures are
returned in a StoreResult rather than raised.
"""
from pathlib import Path
from typing import NamedTuple, Optional

from .config import SAVE_FILE

RECORD_FIELDS = ("name", "hunger", "happiness", "energy", "cleanliness", "age", "money")


class PetRecord(NamedTuple):
    name: str
    hunger: int
    happiness: int
    energy: int
    cleanliness: int
    age: int
    money: int


class StoreResult(NamedTuple):
    record: Optional[PetRecord] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_record(record: PetRecord) -> str:
    return "".join(f"{value}\n" for value in record)


def parse_record(text: str) -> PetRecord:
    """First line is the name verbatim; the six numbers after it are whitespace-delimited."""
    name, _, rest = text.partition("\n")
    fields = rest.split()
    if len(fields) < len(RECORD_FIELDS) - 1:
        raise ValueError(f"expected {len(RECORD_FIELDS) - 1} numeric fields after the name, found {len(fields)}")
    numbers = [int(field) for field in fields[:len(RECORD_FIELDS) - 1]]
    return PetRecord(name.rstrip("\r"), *numbers)


def save_record(record: PetRecord, path: Path = SAVE_FILE) -> StoreResult:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(format_record(record))
    except OSError as e:
        return StoreResult(record, e)
    return StoreResult(record)


def load_record(path: Path = SAVE_FILE) -> StoreResult:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return StoreResult(parse_record(f.read()))
    except (OSError, ValueError) as e:
        # ValueError covers undecodable bytes as well as bad fields
        return StoreResult(error=e)
