"""
Balance bookkeeping around a resolved round.

The payout calculator reports winnings only. Settling a round also hands back
the principal of every winning or pushed stake:

- Player wins: the Player stake comes back
- Banker wins: the Banker stake comes back
- Tie: every stake comes back (Player and Banker push, Tie wins)

Balances are rounded to cents on every update.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from puntobanco.baccarat.errors import InsufficientFundsError
from puntobanco.baccarat.payout import Bet, Outcome, calculate_total_payout
from puntobanco.baccarat.rules import BaccaratRules


def _to_cents(amount: float) -> float:
    return round(float(amount), 2)


def principal_return(bets: Bet, outcome: Union[Outcome, str]) -> float:
    """Stake handed back to the bettor for a given outcome."""
    outcome = Outcome(outcome)
    if outcome is Outcome.PLAYER:
        return bets.player
    elif outcome is Outcome.BANKER:
        return bets.banker
    return bets.total


@dataclass(frozen=True)
class Settlement:
    """
    Money movement for one round.

    Attributes:
        stake: Total amount debited when the bets were placed
        principal_returned: Stake handed back (winning and pushed areas)
        winnings: Payout on top of the principal
    """

    stake: float
    principal_returned: float
    winnings: float

    @property
    def total_return(self) -> float:
        return self.principal_returned + self.winnings

    @property
    def net(self) -> float:
        return self.total_return - self.stake


def settle_round(
    bets: Bet,
    outcome: Union[Outcome, str],
    payout: Optional[float] = None,
    rules: Optional[BaccaratRules] = None,
) -> Settlement:
    """
    Work out what a round returns to the bettor.

    Args:
        bets: Stakes placed on the round
        outcome: Winning side
        payout: Winnings already computed for the round; calculated from
            `bets` and `outcome` if None
        rules: Payout rates used when `payout` is None

    Returns:
        Settlement for the round
    """
    if payout is None:
        payout = calculate_total_payout(bets, outcome, rules)
    return Settlement(
        stake=bets.total,
        principal_returned=principal_return(bets, outcome),
        winnings=payout,
    )


class Ledger:
    """
    Player balance with cent rounding.

    >>> ledger = Ledger(100)
    >>> ledger.debit(30)
    70.0
    >>> ledger.credit(9.5)
    79.5
    """

    def __init__(self, initial_balance: float = 10000):
        if not math.isfinite(initial_balance) or initial_balance < 0:
            raise ValueError("Initial balance must be a finite, non-negative amount")
        self.initial_balance = _to_cents(initial_balance)
        self.balance = self.initial_balance

    @staticmethod
    def _check_amount(amount: float) -> None:
        if not math.isfinite(amount) or amount < 0:
            raise ValueError(f"Amount must be a finite, non-negative number, got {amount!r}")

    def can_afford(self, amount: float) -> bool:
        return math.isfinite(amount) and 0 <= amount <= self.balance

    def debit(self, amount: float) -> float:
        """
        Take `amount` from the balance.

        Returns:
            The new balance

        Raises:
            InsufficientFundsError: If the balance does not cover `amount`
        """
        self._check_amount(amount)
        if amount > self.balance:
            raise InsufficientFundsError(self.balance, amount)
        self.balance = _to_cents(self.balance - amount)
        return self.balance

    def credit(self, amount: float) -> float:
        """Add `amount` to the balance and return the new balance."""
        self._check_amount(amount)
        self.balance = _to_cents(self.balance + amount)
        return self.balance

    def reset(self) -> float:
        self.balance = self.initial_balance
        return self.balance

    def __repr__(self) -> str:
        return f"Ledger(balance={self.balance:.2f})"
