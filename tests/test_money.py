import pytest

from sardips.money import MoneyHungry, Wallet


def test_default_wallet_is_empty():
    wallet = Wallet()
    assert wallet.balance == 0
    assert str(wallet) == "0.00"


def test_wallet_shows_cents_as_decimal():
    assert str(Wallet(1234)) == "12.34"


def test_negative_balance_keeps_sign():
    assert str(Wallet(-250)) == "-2.50"


@pytest.mark.parametrize("cents", [1, 99, 100, 5005, 123456])
def test_display_round_trips_to_cents(cents):
    text = str(Wallet(cents))
    assert round(float(text) * 100) == cents
    assert len(text.split(".")[1]) == 2


def test_balance_is_mutable():
    wallet = Wallet(100)
    wallet.balance += 600
    assert wallet.balance == 700


def test_money_hungry_holds_fields():
    hungry = MoneyHungry(previous_balance=10, max_care=500)
    assert (hungry.previous_balance, hungry.max_care) == (10, 500)