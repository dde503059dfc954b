"""Money amounts, kept in cents, and wallets that hold them."""

from __future__ import annotations

from dataclasses import dataclass

Money = int


@dataclass
class Wallet:
    """A balance in cents."""

    balance: Money = 0

    def __str__(self) -> str:
        return f"{self.balance / 100:.2f}"


@dataclass
class MoneyHungry:
    """Marks a creature that cares about changes in the player's balance."""

    previous_balance: Money
    max_care: Money