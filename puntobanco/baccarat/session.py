"""
Single-player Baccarat session.

The round engine keeps no state between calls. A session is the host around
it: it owns the current shoe, the player's balance and a short history, and
threads the shoe returned by each round into the next one.
"""

import logging
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from puntobanco.common.shoe import Shoe, create_shoe, needs_shuffle
from puntobanco.common.util import RandomSource
from puntobanco.baccarat.errors import BaccaratError
from puntobanco.baccarat.game import execute_game_round
from puntobanco.baccarat.hand import BaccaratHand
from puntobanco.baccarat.ledger import Ledger, Settlement, settle_round
from puntobanco.baccarat.payout import Bet, Outcome
from puntobanco.baccarat.rules import BaccaratRules, TableLimits
from puntobanco.baccarat.validators import check_bets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundRecord:
    """
    History entry for one settled round.

    Attributes:
        outcome: Winning side
        player_hand: Player's final hand
        banker_hand: Banker's final hand
        bets: Stakes placed on the round
        payout: Total winnings
        settlement: Stake, returned principal and winnings
        balance_after: Balance once the round was settled
        id: Unique identifier for this round
        timestamp: When the round was settled (UTC)
    """

    outcome: Outcome
    player_hand: BaccaratHand
    banker_hand: BaccaratHand
    bets: Bet
    payout: float
    settlement: Settlement
    balance_after: float
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class GameSession:
    """
    A player's seat at a Baccarat table.

    Handles validation, shoe replacement, balance bookkeeping and history
    around the pure round engine.
    """

    def __init__(
        self,
        rules: Optional[BaccaratRules] = None,
        limits: Optional[TableLimits] = None,
        shoe: Optional[Shoe] = None,
        rng: Optional[RandomSource] = None,
    ):
        """
        Initialize a session.

        Args:
            rules: Game rules configuration
            limits: Table limits and bankroll settings
            shoe: Starting shoe (a fresh one is shuffled if not provided)
            rng: Random source for every shuffle in this session
        """
        self.rules = rules or BaccaratRules()
        self.limits = limits or TableLimits()
        self.rng = rng
        self.shoe = shoe if shoe is not None else self._new_shoe()
        self.ledger = Ledger(self.limits.initial_balance)
        self.history: deque = deque(maxlen=self.limits.max_history_entries)

        # Statistics
        self.rounds_played = 0
        self.player_wins = 0
        self.banker_wins = 0
        self.ties = 0
        self.naturals = 0
        self.shoes_used = 1

    @property
    def balance(self) -> float:
        return self.ledger.balance

    def _new_shoe(self) -> Shoe:
        return create_shoe(self.rules.num_decks, self.rules.shuffle_threshold, self.rng)

    def reshuffle(self) -> Shoe:
        """Replace the current shoe with a freshly shuffled one."""
        self.shoe = self._new_shoe()
        self.shoes_used += 1
        logger.info("New shoe shuffled (%d cards)", self.shoe.total_cards)
        return self.shoe

    def play_round(self, bets: Bet) -> RoundRecord:
        """
        Validate the bets, play one round and settle it.

        Nothing changes if the bets are rejected.

        Args:
            bets: Stakes on each area

        Returns:
            The RoundRecord added to the history

        Raises:
            InvalidBetError: If the bets break the table limits
            InsufficientFundsError: If the balance does not cover the bets
        """
        try:
            check_bets(bets, self.ledger.balance, self.limits)
        except BaccaratError as e:
            logger.warning("Bet rejected: %s", e)
            raise

        if needs_shuffle(self.shoe):
            self.reshuffle()

        result = execute_game_round(self.shoe, bets, self.rules)
        self.shoe = result.shoe
        self.ledger.debit(bets.total)

        settlement = settle_round(bets, result.outcome, result.payout)
        if settlement.total_return > 0:
            self.ledger.credit(settlement.total_return)

        self.rounds_played += 1
        if result.outcome is Outcome.PLAYER:
            self.player_wins += 1
        elif result.outcome is Outcome.BANKER:
            self.banker_wins += 1
        else:
            self.ties += 1
        if result.is_natural:
            self.naturals += 1

        record = RoundRecord(
            outcome=result.outcome,
            player_hand=result.player_hand,
            banker_hand=result.banker_hand,
            bets=bets,
            payout=result.payout,
            settlement=settlement,
            balance_after=self.ledger.balance,
        )
        self.history.appendleft(record)

        logger.info(
            "Round %d: %s wins, stake %.2f, return %.2f, balance %.2f",
            self.rounds_played,
            result.outcome,
            settlement.stake,
            settlement.total_return,
            self.ledger.balance,
        )
        return record

    @property
    def last_round(self) -> Optional[RoundRecord]:
        return self.history[0] if self.history else None

    def get_history(self) -> List[RoundRecord]:
        """Past rounds, newest first."""
        return list(self.history)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get session statistics.

        Returns:
            Dictionary with statistics
        """
        total_decisive = self.player_wins + self.banker_wins

        return {
            "rounds_played": self.rounds_played,
            "player_wins": self.player_wins,
            "banker_wins": self.banker_wins,
            "ties": self.ties,
            "naturals": self.naturals,
            "shoes_used": self.shoes_used,
            "cards_remaining": self.shoe.cards_remaining,
            "balance": self.ledger.balance,
            "player_win_rate": self.player_wins / total_decisive if total_decisive > 0 else 0,
            "banker_win_rate": self.banker_wins / total_decisive if total_decisive > 0 else 0,
            "tie_rate": self.ties / self.rounds_played if self.rounds_played > 0 else 0,
        }

    def reset(self) -> None:
        """Start over: new shoe, initial balance, no history or statistics."""
        self.shoe = self._new_shoe()
        self.ledger.reset()
        self.history.clear()
        self.rounds_played = 0
        self.player_wins = 0
        self.banker_wins = 0
        self.ties = 0
        self.naturals = 0
        self.shoes_used = 1

    def __repr__(self) -> str:
        return (
            f"GameSession(rounds={self.rounds_played}, balance={self.ledger.balance:.2f}, "
            f"P:{self.player_wins}, B:{self.banker_wins}, T:{self.ties})"
        )
