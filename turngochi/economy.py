"""
Coin balance and the shop.

The purchase operations take the attribute to boost as an argument; the
shop menu decides which attribute each item is wired to.
"""
from enum import Enum
from typing import NamedTuple

from .attributes import BoundedAttribute
from .config import (
    STARTING_MONEY,
    FOOD_PRICE, FOOD_BOOST,
    MEDICINE_PRICE, MEDICINE_BOOST,
    TOY_PRICE, TOY_BOOST,
)


class Purchase(Enum):
    FOOD = "1"
    MEDICINE = "2"
    TOY = "3"

    @classmethod
    def parse(cls, choice):
        """Map a shop menu key to a Purchase, or None for anything else."""
        try:
            return cls(str(choice).strip())
        except ValueError:
            return None


# item -> (display name, price, boost, success message, failure message)
SHOP_ITEMS = {
    Purchase.FOOD: ("Buy Food", FOOD_PRICE, FOOD_BOOST,
                    "[green]You bought food and fed your pet.[/green]",
                    "[yellow]Not enough money to buy food.[/yellow]"),
    Purchase.MEDICINE: ("Buy Medicine", MEDICINE_PRICE, MEDICINE_BOOST,
                        "[magenta]You bought medicine and healed your pet.[/magenta]",
                        "[yellow]Not enough money to buy medicine.[/yellow]"),
    Purchase.TOY: ("Buy Toy", TOY_PRICE, TOY_BOOST,
                   "[cyan]You bought a toy and made your pet happy.[/cyan]",
                   "[yellow]Not enough money to buy a toy.[/yellow]"),
}


class PurchaseResult(NamedTuple):
    item: Purchase
    success: bool
    message: str


class Economy:
    def __init__(self, balance: int = STARTING_MONEY):
        self._balance = balance

    def balance(self) -> int:
        return self._balance

    def earn(self, amount: int) -> int:
        self._balance += amount
        return self._balance

    def spend(self, amount: int) -> bool:
        """Debit amount if affordable. Never partially spends."""
        if self._balance >= amount:
            self._balance -= amount
            return True
        return False

    def buy(self, item: Purchase, attribute: BoundedAttribute) -> PurchaseResult:
        _, price, boost, ok_msg, fail_msg = SHOP_ITEMS[item]
        if not self.spend(price):
            return PurchaseResult(item, False, fail_msg)
        attribute.increase(boost)
        return PurchaseResult(item, True, ok_msg)

    def buy_food(self, hunger: BoundedAttribute) -> PurchaseResult:
        return self.buy(Purchase.FOOD, hunger)

    def buy_medicine(self, attribute: BoundedAttribute) -> PurchaseResult:
        # Boosts whatever attribute it is handed, not necessarily health.
        return self.buy(Purchase.MEDICINE, attribute)

    def buy_toy(self, happiness: BoundedAttribute) -> PurchaseResult:
        return self.buy(Purchase.TOY, happiness)

    def __repr__(self):
        return f"Economy(balance={self._balance})"
