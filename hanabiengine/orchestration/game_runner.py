"""Single game runner.

Owns the status field: lobby while seats fill, ongoing once everyone has
joined, over as soon as is_game_over holds after a turn.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from hanabiengine.engine import (
    GameOptions,
    GameState,
    GameStatus,
    PlayerView,
    commit_action,
    empty_player,
    game_over_reason,
    get_legal_actions,
    get_score,
    is_game_over,
    join_game,
    new_game,
)
from hanabiengine.engine.rules import Discard, Play

if TYPE_CHECKING:
    from hanabiengine.agent.protocol import AgentProtocol


@dataclass
class GameResult:
    """Result of a completed game."""

    score: int
    num_turns: int
    reason: Optional[str]  # which end condition fired, None if max_turns hit first
    player_ids: tuple[str, ...]
    final_state: GameState


def start_game(state: GameState) -> GameState:
    """Move a full lobby to ongoing."""
    if state.status != GameStatus.LOBBY:
        raise ValueError(f"Cannot start a game in status {state.status.value}")
    if len(state.players) != state.players_count:
        raise ValueError(
            f"Waiting for players: {len(state.players)}/{state.players_count} joined"
        )
    return state.with_status(GameStatus.ONGOING)


def advance(state: GameState, action) -> GameState:
    """Commit one action on an ongoing game and close it when it ends."""
    if state.status != GameStatus.ONGOING:
        raise ValueError(f"Cannot play in status {state.status.value}")
    state = commit_action(state, action)
    if is_game_over(state):
        state = state.with_status(GameStatus.OVER)
    return state


class GameRunner:
    """Runs a single Hanabi game to completion."""

    def __init__(
        self,
        agents: dict[str, "AgentProtocol"],
        multicolor: bool = False,
        seed: Optional[int] = None,
        max_turns: int = 1000,
    ):
        self._agents = agents
        self._options = GameOptions(
            players_count=len(agents), multicolor=multicolor, seed=seed
        )
        self._max_turns = max_turns
        self.last_state: Optional[GameState] = None

    def setup(self) -> GameState:
        """Create the game, seat every agent and start it."""
        state = new_game(self._options)
        for pid, agent in self._agents.items():
            state = join_game(state, empty_player(pid, agent.name))
        return start_game(state)

    def run(self) -> GameResult:
        """Run the game and return the result."""
        player_ids = list(self._agents.keys())
        state = self.setup()
        num_turns = 0

        while state.status == GameStatus.ONGOING and num_turns < self._max_turns:
            index = state.current_player
            agent = self._agents[player_ids[index]]
            legal = get_legal_actions(state, index)
            if not legal:
                break

            player_view = PlayerView.from_state(state, index)
            action = agent.get_action(player_view, legal, index)

            if action is None:
                action = next((a for a in legal if isinstance(a, Discard)), legal[0])
            if isinstance(action, Play) and action.card is None:
                hand = state.player(index).hand
                if 0 <= action.card_index < len(hand):
                    action = replace(action, card=hand[action.card_index])

            state = advance(state, action)
            num_turns += 1

        self.last_state = state
        return GameResult(
            score=get_score(state),
            num_turns=num_turns,
            reason=game_over_reason(state),
            player_ids=tuple(player_ids),
            final_state=state,
        )
