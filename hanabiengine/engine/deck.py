"""Deck creation and shuffling."""

import random
from typing import List, Optional, Sequence, TypeVar

from hanabiengine.engine.card import BASE_COLORS, Card, Color

T = TypeVar("T")

# number -> copies per base color
CARD_COUNTS = {1: 3, 2: 2, 3: 2, 4: 2, 5: 1}


def shuffle_seeded(items: Sequence[T], seed: int) -> List[T]:
    """Return a shuffled copy of items. The same seed always gives the same order."""
    shuffled = list(items)
    rng = random.Random(seed)
    rng.shuffle(shuffled)
    return shuffled


def create_deck(multicolor: bool = False, seed: Optional[int] = None) -> List[Card]:
    """Create a Hanabi deck.

    - 5 base colors x (three 1s, two each of 2/3/4, one 5): 50 cards
    - Multicolor variant adds one of each number 1-5: 55 cards

    Without a seed the deck is returned in construction order.
    """
    cards: List[Card] = []

    for color in BASE_COLORS:
        for number, copies in CARD_COUNTS.items():
            for _ in range(copies):
                cards.append(Card(color=color, number=number))

    # Extension cards when applicable
    if multicolor:
        for number in CARD_COUNTS:
            cards.append(Card(color=Color.MULTICOLOR, number=number))

    if seed is not None:
        cards = shuffle_seeded(cards, seed)

    return cards
