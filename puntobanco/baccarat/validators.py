"""
Bet validation.

These checks run before a round is played; the round engine itself assumes it
is handed non-negative stakes and never validates them.
"""

import math
from numbers import Real
from typing import Optional

from puntobanco.baccarat.errors import InsufficientFundsError, InvalidBetError
from puntobanco.baccarat.payout import Bet, BetType
from puntobanco.baccarat.rules import TableLimits


def _is_finite_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_bet_amount(amount) -> bool:
    """A bet amount must be a finite number greater than zero."""
    return _is_finite_number(amount) and amount > 0


def validate_balance(balance, bet_amount) -> bool:
    """
    Check that `balance` covers `bet_amount`.

    Both must be finite, the bet positive and the balance non-negative.
    """
    if not (_is_finite_number(balance) and _is_finite_number(bet_amount)):
        return False
    if bet_amount <= 0 or balance < 0:
        return False
    return balance >= bet_amount


def validate_chip_value(chip_value, limits: Optional[TableLimits] = None) -> bool:
    """Check that `chip_value` is one of the table's chip denominations."""
    limits = limits or TableLimits()
    return _is_finite_number(chip_value) and chip_value in limits.chip_denominations


def check_bets(bets: Bet, balance: float, limits: Optional[TableLimits] = None) -> None:
    """
    Validate a full set of bets against the table limits and the balance.

    An area left at zero is simply not bet; any other area must lie within
    ``[min_bet, max_bet]``.

    Args:
        bets: The stakes to check
        balance: Balance the stakes will be debited from
        limits: Table limits (defaults if None)

    Raises:
        InvalidBetError: If a stake or the total breaks the table limits
        InsufficientFundsError: If the total stake exceeds the balance
    """
    limits = limits or TableLimits()

    for area in BetType:
        amount = bets.amount_for(area)
        if not _is_finite_number(amount) or amount < 0:
            raise InvalidBetError(f"Invalid {area.value} bet: {amount!r}", area=area.value)
        if amount == 0:
            continue
        if amount < limits.min_bet:
            raise InvalidBetError(
                f"{area.value.capitalize()} bet {amount} is below the minimum of {limits.min_bet}",
                area=area.value,
            )
        if amount > limits.max_bet:
            raise InvalidBetError(
                f"{area.value.capitalize()} bet {amount} is above the maximum of {limits.max_bet}",
                area=area.value,
            )

    total = bets.total
    if total <= 0:
        raise InvalidBetError("At least one area must be bet")
    if total > limits.max_total_bet:
        raise InvalidBetError(f"Total bet {total} is above the table maximum of {limits.max_total_bet}")
    if not validate_balance(balance, total):
        raise InsufficientFundsError(balance, total)
