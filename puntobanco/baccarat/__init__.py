"""
Baccarat (punto banco) game implementation.

This module provides the round-resolution engine for the casino game Baccarat:
hand scoring, the third-card drawing tableau, payouts, and a pure round
function, plus a session host, bet validation and simulation tools.
"""

from puntobanco.common.shoe import (
    Shoe,
    create_shoe,
    deal_card,
    get_remaining_cards,
    needs_shuffle,
)
from puntobanco.baccarat.errors import (
    BaccaratError,
    InsufficientFundsError,
    InvalidBetError,
    ShoeExhaustedError,
)
from puntobanco.baccarat.game import RoundResult, determine_outcome, execute_game_round
from puntobanco.baccarat.hand import BaccaratHand, calculate_score, get_card_value
from puntobanco.baccarat.ledger import Ledger, Settlement, principal_return, settle_round
from puntobanco.baccarat.payout import (
    Bet,
    BetType,
    Outcome,
    PayoutResult,
    calculate_payout,
    calculate_total_payout,
)
from puntobanco.baccarat.rules import (
    BaccaratRules,
    TableLimits,
    should_banker_draw,
    should_player_draw,
)
from puntobanco.baccarat.session import GameSession, RoundRecord

__all__ = [
    "BaccaratError",
    "BaccaratHand",
    "BaccaratRules",
    "Bet",
    "BetType",
    "GameSession",
    "InsufficientFundsError",
    "InvalidBetError",
    "Ledger",
    "Outcome",
    "PayoutResult",
    "RoundRecord",
    "RoundResult",
    "Settlement",
    "Shoe",
    "ShoeExhaustedError",
    "TableLimits",
    "calculate_payout",
    "calculate_score",
    "calculate_total_payout",
    "create_shoe",
    "deal_card",
    "determine_outcome",
    "execute_game_round",
    "get_card_value",
    "get_remaining_cards",
    "needs_shuffle",
    "principal_return",
    "settle_round",
    "should_banker_draw",
    "should_player_draw",
]
