"""Hint knowledge: what each card's holder has been told about it."""

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

from hanabiengine.engine.card import (
    COLORS,
    NUMBERS,
    Card,
    CardKnowledge,
    Color,
    HintType,
    Knowledge,
)
from hanabiengine.engine.game_state import GameOptions

if TYPE_CHECKING:
    from hanabiengine.engine.rules import Hint


def empty_hint(options: GameOptions) -> CardKnowledge:
    """Knowledge of a card nobody has hinted about yet."""
    colors = tuple(
        Knowledge.IMPOSSIBLE
        if c == Color.MULTICOLOR and not options.multicolor
        else Knowledge.POSSIBLE
        for c in COLORS
    )
    numbers = (Knowledge.IMPOSSIBLE,) + (Knowledge.POSSIBLE,) * len(NUMBERS)
    return CardKnowledge(colors=colors, numbers=numbers)


def _slot(hint_type: HintType, value: Union[Color, int]) -> int:
    if hint_type == HintType.COLOR:
        return COLORS.index(Color(value))
    return int(value)


def _matches(card: Card, hint_type: HintType, value: Union[Color, int]) -> bool:
    if hint_type == HintType.COLOR:
        return card.color == Color(value)
    return card.number == int(value)


def _narrow(
    vector: Tuple[Knowledge, ...], slot: int, positive: bool
) -> Tuple[Knowledge, ...]:
    if positive:
        return tuple(
            Knowledge.CERTAIN if i == slot else Knowledge.IMPOSSIBLE
            for i in range(len(vector))
        )
    return tuple(
        Knowledge.IMPOSSIBLE if i == slot else k for i, k in enumerate(vector)
    )


def apply_hint(
    hand: Sequence[Card], hint: "Hint", options: Optional[GameOptions] = None
) -> Tuple[Card, ...]:
    """Return the hand with the hint applied to every card.

    A card matching the hint becomes certain of the hinted value and every
    other value of that attribute becomes impossible. A card not matching it
    only loses the hinted value. The other attribute is left untouched and
    cards are updated independently of each other.

    A card with no knowledge yet starts from empty_hint(options); without
    options that is a game without multicolor.
    """
    unhinted = empty_hint(options or GameOptions(players_count=2))
    hint_type = HintType(hint.type)
    slot = _slot(hint_type, hint.value)
    updated: List[Card] = []
    for card in hand:
        knowledge = card.knowledge or unhinted
        positive = _matches(card, hint_type, hint.value)
        if hint_type == HintType.COLOR:
            knowledge = CardKnowledge(
                colors=_narrow(knowledge.colors, slot, positive),
                numbers=knowledge.numbers,
            )
        else:
            knowledge = CardKnowledge(
                colors=knowledge.colors,
                numbers=_narrow(knowledge.numbers, slot, positive),
            )
        updated.append(card.with_knowledge(knowledge))
    return tuple(updated)


def hinted_indexes(hand: Sequence[Card], hint: "Hint") -> List[int]:
    """Positions in hand that a hint points at."""
    hint_type = HintType(hint.type)
    return [i for i, card in enumerate(hand) if _matches(card, hint_type, hint.value)]
