"""
Baccarat round engine.

Implements the complete Baccarat round logic including dealing, drawing rules,
outcome determination and payout, as a single pure function of a shoe and a
set of bets.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from puntobanco.common.card import Card
from puntobanco.common.shoe import Shoe, deal_card
from puntobanco.baccarat.hand import BaccaratHand, get_card_value
from puntobanco.baccarat.payout import Bet, Outcome, calculate_total_payout
from puntobanco.baccarat.rules import BaccaratRules, should_banker_draw, should_player_draw

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    """
    Result of a Baccarat round.

    Attributes:
        player_hand: Player's final hand (2 or 3 cards)
        banker_hand: Banker's final hand (2 or 3 cards)
        outcome: Winning side
        payout: Total winnings across all betting areas
        shoe: The shoe after this round's cards were dealt
    """

    player_hand: BaccaratHand
    banker_hand: BaccaratHand
    outcome: Outcome
    payout: float
    shoe: Shoe

    @property
    def is_natural(self) -> bool:
        return self.player_hand.is_natural or self.banker_hand.is_natural

    @property
    def cards_dealt(self) -> int:
        return self.player_hand.card_count + self.banker_hand.card_count


def determine_outcome(player_hand: BaccaratHand, banker_hand: BaccaratHand) -> Outcome:
    """
    Determine the outcome of the round.

    Returns:
        Outcome enum value
    """
    if player_hand.score > banker_hand.score:
        return Outcome.PLAYER
    elif banker_hand.score > player_hand.score:
        return Outcome.BANKER
    else:
        return Outcome.TIE


def _deal_to(hand: BaccaratHand, shoe: Shoe) -> Tuple[BaccaratHand, Shoe, Card]:
    card, shoe = deal_card(shoe)
    return hand.add_card(card), shoe, card


def execute_game_round(shoe: Shoe, bets: Bet, rules: Optional[BaccaratRules] = None) -> RoundResult:
    """
    Play a complete round of Baccarat from `shoe`.

    Order of play:
    1. Deal Player, Banker, Player, Banker
    2. A natural (8 or 9) on either side ends the drawing
    3. Otherwise Player draws on 0-5
    4. Banker draws per the tableau, given Player's third card (if any)
    5. Higher score wins; equal scores tie

    The input shoe is not modified; the shoe to use for the next round is
    returned in the result. The caller must make sure at least six cards
    remain.

    Args:
        shoe: Shoe to deal from
        bets: Stakes placed on each area (used only to compute the payout)
        rules: Payout rates (standard rates if None)

    Returns:
        RoundResult with both hands, the outcome, the total payout and the new shoe
    """
    player_hand = BaccaratHand()
    banker_hand = BaccaratHand()

    player_hand, shoe, _ = _deal_to(player_hand, shoe)
    banker_hand, shoe, _ = _deal_to(banker_hand, shoe)
    player_hand, shoe, _ = _deal_to(player_hand, shoe)
    banker_hand, shoe, _ = _deal_to(banker_hand, shoe)

    if not (player_hand.is_natural or banker_hand.is_natural):
        player_third_card_value = None
        if should_player_draw(player_hand.score):
            player_hand, shoe, card = _deal_to(player_hand, shoe)
            player_third_card_value = get_card_value(card)

        if should_banker_draw(banker_hand.score, player_third_card_value):
            banker_hand, shoe, _ = _deal_to(banker_hand, shoe)

    outcome = determine_outcome(player_hand, banker_hand)
    payout = calculate_total_payout(bets, outcome, rules)

    logger.debug("Round: player %s, banker %s -> %s, payout %.2f", player_hand, banker_hand, outcome, payout)

    return RoundResult(
        player_hand=player_hand,
        banker_hand=banker_hand,
        outcome=outcome,
        payout=payout,
        shoe=shoe,
    )
