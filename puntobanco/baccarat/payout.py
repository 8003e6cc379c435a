"""
Baccarat payout calculation.

Payouts are winnings only; a returned stake (the principal of a winning or
pushed bet) is bookkeeping for the ledger, not part of the payout.

Payouts:
- Player bet: 1:1
- Banker bet: 1:0.95 (5% commission)
- Tie bet: 8:1, Player and Banker bets push
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from puntobanco.baccarat.rules import BaccaratRules


class BetType(Enum):
    """Betting areas in Baccarat."""

    PLAYER = "player"
    BANKER = "banker"
    TIE = "tie"


class Outcome(Enum):
    """Possible outcomes of a Baccarat round: the side that won."""

    PLAYER = "player"
    BANKER = "banker"
    TIE = "tie"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Bet:
    """
    Stakes placed on each area before a round.

    Attributes:
        player: Amount staked on Player
        banker: Amount staked on Banker
        tie: Amount staked on Tie
    """

    player: float = 0.0
    banker: float = 0.0
    tie: float = 0.0

    @property
    def total(self) -> float:
        return self.player + self.banker + self.tie

    def amount_for(self, area: Union[BetType, str]) -> float:
        return getattr(self, BetType(area).value)

    def add(self, area: Union[BetType, str], amount: float) -> "Bet":
        """Return a new bet with `amount` added to `area`, rounded to cents."""
        key = BetType(area).value
        return replace(self, **{key: round(getattr(self, key) + amount, 2)})

    def __bool__(self) -> bool:
        return self.total > 0


@dataclass(frozen=True)
class PayoutResult:
    """Winnings per area and in total for one resolved round."""

    player_payout: float = 0.0
    banker_payout: float = 0.0
    tie_payout: float = 0.0

    @property
    def total_payout(self) -> float:
        return self.player_payout + self.banker_payout + self.tie_payout


def calculate_payout(
    bets: Bet, outcome: Union[Outcome, str], rules: Optional[BaccaratRules] = None
) -> PayoutResult:
    """
    Calculate the winnings on every area for a given outcome.

    Args:
        bets: Stakes placed on each area
        outcome: Winning side of the round
        rules: Payout rates to apply (standard rates if None)

    Returns:
        PayoutResult with the winnings per area; losing and pushed areas pay 0
    """
    rules = rules or BaccaratRules()
    outcome = Outcome(outcome)

    if outcome is Outcome.PLAYER:
        return PayoutResult(player_payout=bets.player * rules.player_payout)
    elif outcome is Outcome.BANKER:
        return PayoutResult(banker_payout=bets.banker * rules.banker_payout)
    # Player and Banker stakes push on a tie: returned, but no winnings
    return PayoutResult(tie_payout=bets.tie * rules.tie_payout)


def calculate_total_payout(
    bets: Bet, outcome: Union[Outcome, str], rules: Optional[BaccaratRules] = None
) -> float:
    """Total winnings across all areas for a given outcome."""
    return calculate_payout(bets, outcome, rules).total_payout
