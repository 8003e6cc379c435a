"""
Baccarat hand implementation.

In Baccarat, hand values are calculated differently than blackjack:
- Cards 2-9 are worth face value
- 10, J, Q, K are worth 0
- Aces are worth 1
- Only the rightmost digit of the sum counts (17 = 7, 23 = 3)
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from puntobanco.common.card import Card, Rank

_CARD_VALUES = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 0,
    Rank.JACK: 0,
    Rank.QUEEN: 0,
    Rank.KING: 0,
}


def get_card_value(card: Card) -> int:
    """Point value of a single card (0-9); suit does not matter."""
    return _CARD_VALUES[card.rank]


def calculate_score(cards: Iterable[Card]) -> int:
    """
    Score a set of cards: the sum of their point values, modulo 10.

    >>> from puntobanco.common.card import parse_cards
    >>> calculate_score(parse_cards("7H 8S"))
    5
    """
    return sum(get_card_value(card) for card in cards) % 10


@dataclass(frozen=True)
class BaccaratHand:
    """
    Represents a hand in Baccarat.

    The score and natural flag are always derived from the cards, never stored
    separately.
    """

    cards: Tuple[Card, ...] = ()

    def __post_init__(self):
        if not isinstance(self.cards, tuple):
            object.__setattr__(self, "cards", tuple(self.cards))

    def add_card(self, card: Card) -> "BaccaratHand":
        """
        Return a new hand with `card` appended.

        Args:
            card: Card to add

        Returns:
            The extended hand; this hand is unchanged
        """
        return BaccaratHand(self.cards + (card,))

    @property
    def score(self) -> int:
        """
        Hand value (0-9).

        In Baccarat, only the rightmost digit counts.
        For example: 15 = 5, 20 = 0, 17 = 7
        """
        return calculate_score(self.cards)

    @property
    def is_natural(self) -> bool:
        """A natural is an 8 or 9 on the first two cards."""
        return len(self.cards) == 2 and self.score in (8, 9)

    @property
    def card_count(self) -> int:
        return len(self.cards)

    @property
    def third_card(self) -> Optional[Card]:
        """The third card, or None if the hand stood on two."""
        return self.cards[2] if len(self.cards) >= 3 else None

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.cards)
        return f"[{cards_str}] = {self.score}"

    def __repr__(self) -> str:
        return f"BaccaratHand(cards={list(self.cards)}, score={self.score})"
