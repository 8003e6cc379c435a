"""
Immutable card shoe.

A shoe is built once per shuffle cycle and never changed afterwards: dealing a
card returns the card together with a *new* shoe whose cursor has moved on.
Callers thread the returned shoe into the next deal, which keeps every round
a pure function of the shoe it started from.

>>> import random
>>> shoe = create_shoe(num_decks=1, shuffle_threshold=0, rng=random.Random(7))
>>> shoe.total_cards
52
>>> card, after = deal_card(shoe)
>>> after.dealt_count, shoe.dealt_count
(1, 0)
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Tuple

from puntobanco.common.card import Card, RANKS, SUITS
from puntobanco.common.util import RandomSource, fisher_yates_shuffle

logger = logging.getLogger(__name__)

CARDS_PER_DECK = 52
DEFAULT_NUM_DECKS = 8
DEFAULT_SHUFFLE_THRESHOLD = 52


class ShoeExhaustedError(IndexError):
    """Raised when a card is requested from a shoe with nothing left to deal."""


@dataclass(frozen=True)
class Shoe:
    """
    An ordered, finite card source with a dealt-card cursor.

    Attributes:
        cards: Every card in the shoe, dealt and undealt, in dealing order
        dealt_count: How many cards have already been dealt
        shuffle_threshold: Remaining-card count at or below which the shoe
            should be replaced
    """

    cards: Tuple[Card, ...] = field(repr=False)
    dealt_count: int = 0
    shuffle_threshold: int = DEFAULT_SHUFFLE_THRESHOLD

    def __post_init__(self):
        if not isinstance(self.cards, tuple):
            object.__setattr__(self, "cards", tuple(self.cards))
        if not 0 <= self.dealt_count <= len(self.cards):
            raise ValueError(
                f"dealt_count must be between 0 and {len(self.cards)}, got {self.dealt_count}"
            )
        if self.shuffle_threshold < 0:
            raise ValueError("shuffle_threshold must be non-negative")

    @classmethod
    def from_cards(cls, cards: Iterable[Card], shuffle_threshold: int = 0) -> "Shoe":
        """
        Build a stacked shoe that deals `cards` in exactly the given order.

        :param cards: Cards in dealing order
        :param shuffle_threshold: Reshuffle threshold for the stacked shoe
        :return: A fresh, unshuffled shoe
        """
        return cls(cards=tuple(cards), dealt_count=0, shuffle_threshold=shuffle_threshold)

    @property
    def total_cards(self) -> int:
        return len(self.cards)

    @property
    def cards_remaining(self) -> int:
        return self.total_cards - self.dealt_count

    @property
    def needs_shuffle(self) -> bool:
        return self.cards_remaining <= self.shuffle_threshold

    @property
    def penetration(self) -> float:
        """Fraction of the shoe that has been dealt."""
        if not self.cards:
            return 0.0
        return self.dealt_count / self.total_cards

    @property
    def dealt_cards(self) -> Tuple[Card, ...]:
        return self.cards[: self.dealt_count]

    def __str__(self) -> str:
        return f"Shoe with {self.cards_remaining} of {self.total_cards} cards remaining"


def build_decks(num_decks: int = DEFAULT_NUM_DECKS) -> List[Card]:
    """
    Build `num_decks` unshuffled 52-card decks, one card per suit and rank each.

    :param num_decks: Number of decks to combine
    :return: The combined cards in deck, suit, rank order
    """
    if num_decks < 1:
        raise ValueError("Number of decks must be at least 1")
    return [Card(suit, rank) for _ in range(num_decks) for suit in SUITS for rank in RANKS]


def create_shoe(
    num_decks: int = DEFAULT_NUM_DECKS,
    shuffle_threshold: int = DEFAULT_SHUFFLE_THRESHOLD,
    rng: Optional[RandomSource] = None,
) -> Shoe:
    """
    Create a freshly shuffled shoe.

    :param num_decks: Number of 52-card decks in the shoe (default is 8)
    :param shuffle_threshold: Remaining-card count that triggers a reshuffle (default is 52)
    :param rng: Random source used for the shuffle, for reproducible shoes
    :return: A shoe with nothing dealt
    """
    cards = fisher_yates_shuffle(build_decks(num_decks), rng)
    if shuffle_threshold >= len(cards):
        raise ValueError("shuffle_threshold must be smaller than the number of cards in the shoe")
    logger.debug("Created shoe: %d decks, %d cards, threshold %d", num_decks, len(cards), shuffle_threshold)
    return Shoe(cards=tuple(cards), dealt_count=0, shuffle_threshold=shuffle_threshold)


def deal_card(shoe: Shoe) -> Tuple[Card, Shoe]:
    """
    Deal the next card.

    The given shoe is not modified.

    :param shoe: The shoe to deal from
    :return: The dealt card and the shoe with its cursor advanced by one
    :raises ShoeExhaustedError: If every card has already been dealt
    """
    if shoe.dealt_count >= shoe.total_cards:
        raise ShoeExhaustedError(f"All {shoe.total_cards} cards have been dealt")
    card = shoe.cards[shoe.dealt_count]
    return card, replace(shoe, dealt_count=shoe.dealt_count + 1)


def needs_shuffle(shoe: Shoe) -> bool:
    """Return True once the remaining cards are at or below the shuffle threshold."""
    return shoe.needs_shuffle


def get_remaining_cards(shoe: Shoe) -> int:
    """Return the number of undealt cards."""
    return shoe.cards_remaining
