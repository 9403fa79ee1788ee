"""Shared fixtures for engine tests."""

from typing import Callable, Sequence

import pytest

from hanabiengine.engine import (
    Card,
    Color,
    GameOptions,
    GameState,
    GameStatus,
    Player,
    Tokens,
    empty_hint,
)


def card(spec: str) -> Card:
    """Build a card from short text: "R3" is a red 3, "M5" a multicolor 5."""
    colors = {
        "B": Color.BLUE,
        "R": Color.RED,
        "G": Color.GREEN,
        "W": Color.WHITE,
        "Y": Color.YELLOW,
        "M": Color.MULTICOLOR,
    }
    return Card(color=colors[spec[0]], number=int(spec[1]))


def cards(specs: str) -> tuple[Card, ...]:
    return tuple(card(s) for s in specs.split())


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory for an ongoing game with chosen hands and piles."""

    def _make(
        hands: Sequence[str],
        played: str = "",
        draw: str = "",
        discard: str = "",
        tokens: Tokens = Tokens(),
        current: int = 0,
        multicolor: bool = False,
        actions_left: int | None = None,
    ) -> GameState:
        options = GameOptions(players_count=len(hands), multicolor=multicolor, seed=0)
        knowledge = empty_hint(options)
        players = tuple(
            Player(
                id=f"p{i}",
                name=f"Player {i}",
                hand=tuple(c.with_knowledge(knowledge) for c in cards(hand)),
                index=i,
            )
            for i, hand in enumerate(hands)
        )
        return GameState(
            options=options,
            players_count=len(hands),
            draw_pile=cards(draw),
            current_player=current,
            actions_left=len(hands) + 1 if actions_left is None else actions_left,
            status=GameStatus.ONGOING,
            played_cards=cards(played),
            discard_pile=cards(discard),
            players=players,
            tokens=tokens,
        )

    return _make
