"""Game engine for Hanabi."""

from hanabiengine.engine.card import Card, CardKnowledge, Color, HintType, Knowledge
from hanabiengine.engine.deck import create_deck
from hanabiengine.engine.game_state import (
    GameOptions,
    GameState,
    GameStatus,
    Player,
    PlayerView,
    Tokens,
)
from hanabiengine.engine.knowledge import apply_hint, empty_hint
from hanabiengine.engine.rules import (
    Action,
    Discard,
    Hint,
    IllegalActionError,
    Play,
    action_from_dict,
    action_to_dict,
    commit_action,
    empty_player,
    get_legal_actions,
    is_playable,
    join_game,
    new_game,
)
from hanabiengine.engine.scoring import (
    game_over_reason,
    get_played_cards_pile,
    get_score,
    is_game_over,
)

__all__ = [
    "Card",
    "CardKnowledge",
    "Color",
    "HintType",
    "Knowledge",
    "create_deck",
    "GameOptions",
    "GameState",
    "GameStatus",
    "Player",
    "PlayerView",
    "Tokens",
    "apply_hint",
    "empty_hint",
    "Action",
    "Discard",
    "Hint",
    "IllegalActionError",
    "Play",
    "action_from_dict",
    "action_to_dict",
    "commit_action",
    "empty_player",
    "get_legal_actions",
    "is_playable",
    "join_game",
    "new_game",
    "game_over_reason",
    "get_played_cards_pile",
    "get_score",
    "is_game_over",
]
