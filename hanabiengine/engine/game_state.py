"""Game state for Hanabi."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from hanabiengine.engine.card import Card, CardKnowledge

MAX_HINTS = 8
MAX_STRIKES = 3


class GameStatus(str, Enum):
    """Lifecycle of a stored game. Moved forward by the caller, never by the rules."""

    LOBBY = "lobby"
    ONGOING = "ongoing"
    OVER = "over"


@dataclass(frozen=True)
class GameOptions:
    """Options fixed at game creation."""

    players_count: int
    multicolor: bool = False
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "playersCount": self.players_count,
            "multicolor": self.multicolor,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameOptions":
        return cls(
            players_count=int(data["playersCount"]),
            multicolor=bool(data.get("multicolor", False)),
            seed=data.get("seed"),
        )


@dataclass(frozen=True)
class Tokens:
    """Hint and strike tokens left."""

    hints: int = MAX_HINTS
    strikes: int = MAX_STRIKES

    def to_dict(self) -> Dict[str, int]:
        return {"hints": self.hints, "strikes": self.strikes}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tokens":
        return cls(hints=int(data["hints"]), strikes=int(data["strikes"]))


@dataclass(frozen=True)
class Player:
    """A seat at the table. hand[0] is the most recently drawn card."""

    id: str
    name: str
    hand: Tuple[Card, ...] = ()
    index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "hand": [c.to_dict() for c in self.hand],
            "index": self.index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        return cls(
            id=data["id"],
            name=data["name"],
            hand=tuple(Card.from_dict(c) for c in data.get("hand", [])),
            index=data.get("index"),
        )


def _cards(data: Dict[str, Any], key: str) -> Tuple[Card, ...]:
    return tuple(Card.from_dict(c) for c in data.get(key) or [])


@dataclass(frozen=True)
class GameState:
    """Immutable Hanabi game state.

    Every container is a tuple of frozen values, so a state handed to the
    rules is never changed by them.
    """

    options: GameOptions
    players_count: int
    draw_pile: Tuple[Card, ...]  # next card drawn is the last one
    current_player: int
    actions_left: int  # counts down once the draw pile is empty
    status: GameStatus = GameStatus.LOBBY
    played_cards: Tuple[Card, ...] = ()
    discard_pile: Tuple[Card, ...] = ()
    players: Tuple[Player, ...] = ()
    tokens: Tokens = field(default_factory=Tokens)
    history: Tuple[str, ...] = ()  # Log of events

    def player(self, index: int) -> Player:
        """Return the player sitting at index."""
        return self.players[index]

    def with_status(self, status: GameStatus) -> "GameState":
        return replace(self, status=GameStatus(status))

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-compatible representation, suitable for relaying verbatim."""
        return {
            "status": self.status.value,
            "playersCount": self.players_count,
            "playedCards": [c.to_dict() for c in self.played_cards],
            "drawPile": [c.to_dict() for c in self.draw_pile],
            "discardPile": [c.to_dict() for c in self.discard_pile],
            "players": [p.to_dict() for p in self.players],
            "tokens": self.tokens.to_dict(),
            "currentPlayer": self.current_player,
            "options": self.options.to_dict(),
            "actionsLeft": self.actions_left,
            "history": list(self.history),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        return cls(
            status=GameStatus(data.get("status", GameStatus.LOBBY.value)),
            players_count=int(data["playersCount"]),
            played_cards=_cards(data, "playedCards"),
            draw_pile=_cards(data, "drawPile"),
            discard_pile=_cards(data, "discardPile"),
            players=tuple(Player.from_dict(p) for p in data.get("players") or []),
            tokens=Tokens.from_dict(data["tokens"]),
            current_player=int(data["currentPlayer"]),
            options=GameOptions.from_dict(data["options"]),
            actions_left=int(data["actionsLeft"]),
            history=tuple(data.get("history") or []),
        )


@dataclass
class PlayerView:
    """Game state as seen by one player.

    Other players' hands are visible; the viewer only sees what hints told
    them about their own cards.
    """

    my_index: int
    my_knowledge: List[Optional[CardKnowledge]]
    other_hands: Dict[int, List[Card]]  # player index -> visible cards
    played_cards: List[Card]
    discard_pile: List[Card]
    draw_pile_size: int
    tokens: Tokens
    current_player: int
    actions_left: int
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, player_index: int) -> "PlayerView":
        """Create a player view from full game state, hiding the viewer's own cards."""
        me = state.player(player_index)
        return cls(
            my_index=player_index,
            my_knowledge=[c.knowledge for c in me.hand],
            other_hands={
                p.index if p.index is not None else i: list(p.hand)
                for i, p in enumerate(state.players)
                if i != player_index
            },
            played_cards=list(state.played_cards),
            discard_pile=list(state.discard_pile),
            draw_pile_size=len(state.draw_pile),
            tokens=state.tokens,
            current_player=state.current_player,
            actions_left=state.actions_left,
            history=list(state.history[-10:]),  # Last 10 events
        )
