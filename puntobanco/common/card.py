"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Hearts, Diamonds, Clubs, and Spades.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Ace, Two through Ten, Jack, Queen, and King. Every rank is a distinct
member, so a Jack is never mistaken for a Ten.

- `Card`: An immutable playing card. A card has a suit and a rank and no other
identity, so two cards from different decks with the same suit and rank
compare equal.

Cards can also be written in a short notation (``"7H"``, ``"10♣"``, ``"KS"``)
which is handy for stacking a shoe in tests and replays.
"""

from dataclasses import dataclass
from enum import Enum, unique
from typing import Iterable, List, Union


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.
    """

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        return self.value

    def __str__(self) -> str:
        return self.rank_str


SUITS = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)
RANKS = tuple(Rank)

_SUIT_LETTERS = {"H": Suit.HEARTS, "D": Suit.DIAMONDS, "C": Suit.CLUBS, "S": Suit.SPADES}
_SUIT_LOOKUP = {**_SUIT_LETTERS, **{suit.value: suit for suit in Suit}}
_RANK_LOOKUP = {**{rank.value: rank for rank in Rank}, "T": Rank.TEN}


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card.

    >>> card = Card(Suit.HEARTS, Rank.TWO)
    >>> print(card)
    2 of ♥
    >>> Card.from_str("KS")
    Card(Suit.SPADES, Rank.KING)
    """

    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")

    @classmethod
    def from_str(cls, token: str) -> "Card":
        """
        Parse a card from short notation: rank then suit.

        Ranks are ``A``, ``2``-``10`` (or ``T``), ``J``, ``Q``, ``K``; suits are
        ``H``, ``D``, ``C``, ``S`` or the suit glyphs. Case-insensitive.

        :param token: The card token, e.g. ``"7H"`` or ``"10♣"``
        :return: The parsed card
        :raises ValueError: If the token is not a valid card
        """
        text = token.strip().upper()
        if len(text) < 2:
            raise ValueError(f"Invalid card notation: {token!r}")
        rank = _RANK_LOOKUP.get(text[:-1])
        suit = _SUIT_LOOKUP.get(text[-1])
        if rank is None or suit is None:
            raise ValueError(f"Invalid card notation: {token!r}")
        return cls(suit, rank)

    @property
    def short(self) -> str:
        """Compact notation that `from_str` accepts back."""
        return f"{self.rank.rank_str}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        return f"{self.rank.rank_str} of {self.suit}"


def parse_cards(notation: Union[str, Iterable[str]]) -> List[Card]:
    """
    Parse several cards at once.

    :param notation: Whitespace or comma separated tokens, or an iterable of tokens
    :return: The cards in the given order
    """
    if isinstance(notation, str):
        notation = notation.replace(",", " ").split()
    return [Card.from_str(token) for token in notation]
