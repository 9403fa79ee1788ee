"""End-of-game queries: game over, score and played piles."""

from typing import Dict, Optional

from hanabiengine.engine.card import Color
from hanabiengine.engine.game_state import GameState


def max_score(state: GameState) -> int:
    """Number of played cards that completes every pile."""
    return 30 if state.options.multicolor else 25


def game_over_reason(state: GameState) -> Optional[str]:
    """Which end condition holds, or None while the game goes on."""
    if state.tokens.strikes <= 0:
        return "strikes"
    if len(state.played_cards) == max_score(state):
        return "fireworks"
    if state.actions_left <= 0:
        return "actions"
    return None


def is_game_over(state: GameState) -> bool:
    return (
        state.actions_left <= 0
        or state.tokens.strikes <= 0
        or len(state.played_cards) == max_score(state)
    )


def get_score(state: GameState) -> int:
    return len(state.played_cards)


def get_played_cards_pile(state: GameState) -> Dict[Color, int]:
    """Highest number played per color, only for colors with a played card."""
    pile: Dict[Color, int] = {}
    for card in state.played_cards:
        pile[card.color] = max(pile.get(card.color, 0), card.number)
    return pile
