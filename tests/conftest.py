"""
Pytest configuration for tests at the root level.

Shared fixtures for deterministic shuffling and stacked shoes.
"""

import random

import pytest

from puntobanco.common.card import parse_cards
from puntobanco.common.shoe import Shoe


@pytest.fixture
def rng():
    """A seeded random source so shuffles are reproducible."""
    return random.Random(42)


@pytest.fixture
def stacked_shoe():
    """Factory for a shoe that deals the given cards in order, e.g. ``stacked_shoe("7H KC 2D 9S")``."""

    def make(notation, shuffle_threshold=0):
        return Shoe.from_cards(parse_cards(notation), shuffle_threshold=shuffle_threshold)

    return make
