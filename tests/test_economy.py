from turngochi.attributes import BoundedAttribute
from turngochi.economy import Economy, Purchase


def test_starting_balance():
    assert Economy().balance() == 50


def test_spend_guards_balance():
    wallet = Economy(10)
    assert wallet.spend(11) is False
    assert wallet.balance() == 10
    assert wallet.spend(10) is True
    assert wallet.balance() == 0


def test_earn_is_unguarded():
    wallet = Economy(0)
    assert wallet.earn(25) == 25


def test_buy_food():
    wallet, hunger = Economy(), BoundedAttribute()
    result = wallet.buy_food(hunger)
    assert result.success
    assert wallet.balance() == 30 and hunger.get() == 70


def test_buy_food_clamps_attribute():
    wallet, hunger = Economy(), BoundedAttribute(95)
    wallet.buy_food(hunger)
    assert hunger.get() == 100


def test_failed_purchase_changes_nothing():
    wallet, attr = Economy(29), BoundedAttribute()
    result = wallet.buy_medicine(attr)
    assert not result.success
    assert "Not enough money" in result.message
    assert wallet.balance() == 29 and attr.get() == 50


def test_buy_toy():
    wallet, happiness = Economy(15), BoundedAttribute(10)
    assert wallet.buy_toy(happiness).success
    assert wallet.balance() == 0 and happiness.get() == 25


def test_purchase_parse():
    assert Purchase.parse("2") is Purchase.MEDICINE
    assert Purchase.parse(" 3 ") is Purchase.TOY
    assert Purchase.parse("9") is None
