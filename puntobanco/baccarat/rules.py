"""
Baccarat rules and drawing logic.

Baccarat has fixed drawing rules - no player decisions after betting.
The rules determine when Player and Banker draw a third card.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from puntobanco.common.shoe import CARDS_PER_DECK, DEFAULT_NUM_DECKS, DEFAULT_SHUFFLE_THRESHOLD

PLAYER_PAYOUT_RATE = 1.0
BANKER_PAYOUT_RATE = 0.95
TIE_PAYOUT_RATE = 8.0

CHIP_DENOMINATIONS = (10, 50, 100, 500, 1000)


@dataclass(frozen=True)
class BaccaratRules:
    """
    Configuration for Baccarat game rules.

    Attributes:
        num_decks: Number of decks in the shoe
        shuffle_threshold: Replace the shoe once this many cards or fewer remain
        player_payout: Winnings per unit staked on a winning Player bet (1:1)
        banker_payout: Winnings per unit staked on a winning Banker bet (1:0.95)
        tie_payout: Winnings per unit staked on a winning Tie bet (8:1)
    """

    num_decks: int = DEFAULT_NUM_DECKS
    shuffle_threshold: int = DEFAULT_SHUFFLE_THRESHOLD
    player_payout: float = PLAYER_PAYOUT_RATE
    banker_payout: float = BANKER_PAYOUT_RATE
    tie_payout: float = TIE_PAYOUT_RATE

    def __post_init__(self):
        if self.num_decks < 1:
            raise ValueError("Number of decks must be at least 1")
        if not 0 <= self.shuffle_threshold < self.total_cards:
            raise ValueError("shuffle_threshold must be between 0 and the number of cards in the shoe")
        if min(self.player_payout, self.banker_payout, self.tie_payout) < 0:
            raise ValueError("Payout rates must be non-negative")

    @property
    def total_cards(self) -> int:
        return self.num_decks * CARDS_PER_DECK

    @property
    def banker_commission(self) -> float:
        """Commission taken from a winning Banker bet (0.05 for the standard game)."""
        return round(1.0 - self.banker_payout, 10)


@dataclass(frozen=True)
class TableLimits:
    """
    Betting limits and bankroll settings for a table.

    Attributes:
        min_bet: Smallest stake accepted on an area that is bet at all
        max_bet: Largest stake accepted on a single area
        max_total_bet: Largest combined stake across all areas
        chip_denominations: Chip values a bet can be built from
        initial_balance: Starting (and reset) balance of a session
        max_history_entries: Number of past rounds a session keeps
    """

    min_bet: float = 10
    max_bet: float = 10000
    max_total_bet: float = 20000
    chip_denominations: Tuple[int, ...] = CHIP_DENOMINATIONS
    initial_balance: float = 10000
    max_history_entries: int = 10

    def __post_init__(self):
        if self.min_bet <= 0:
            raise ValueError("min_bet must be positive")
        if self.max_bet < self.min_bet:
            raise ValueError("max_bet must not be below min_bet")
        if self.max_total_bet < self.max_bet:
            raise ValueError("max_total_bet must not be below max_bet")
        if self.max_history_entries < 0:
            raise ValueError("max_history_entries must be non-negative")


def should_player_draw(player_score: int) -> bool:
    """
    Determine if Player draws a third card.

    Player drawing rules:
    - 0-5: Draw
    - 6-7: Stand
    - 8-9: Natural (no draw)

    Args:
        player_score: Player's two-card total

    Returns:
        True if Player should draw, False otherwise
    """
    return player_score <= 5


def should_banker_draw(banker_score: int, player_third_card_value: Optional[int]) -> bool:
    """
    Determine if Banker draws a third card.

    Banker drawing rules depend on:
    1. Banker's two-card total
    2. Whether Player drew a third card
    3. Value of Player's third card (if drawn)

    Rules:
    - Banker 7-9: Stand
    - If Player didn't draw: Banker draws on 0-5, stands on 6
    - If Player drew:
      - Banker 0-2: Always draw
      - Banker 3: Draw unless Player's 3rd card is 8
      - Banker 4: Draw if Player's 3rd card is 2-7
      - Banker 5: Draw if Player's 3rd card is 4-7
      - Banker 6: Draw if Player's 3rd card is 6-7

    Args:
        banker_score: Banker's two-card total
        player_third_card_value: Point value (0-9) of Player's third card, or
            None if Player stood

    Returns:
        True if Banker should draw, False otherwise
    """
    if banker_score >= 7:
        return False

    if player_third_card_value is None:
        return banker_score <= 5

    if banker_score <= 2:
        return True
    elif banker_score == 3:
        return player_third_card_value != 8
    elif banker_score == 4:
        return 2 <= player_third_card_value <= 7
    elif banker_score == 5:
        return 4 <= player_third_card_value <= 7
    else:
        return 6 <= player_third_card_value <= 7
