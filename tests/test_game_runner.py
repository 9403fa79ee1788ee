"""Tests for the game runner and the status it drives."""

import pytest

from conftest import card
from hanabiengine.engine import (
    Discard,
    GameOptions,
    GameStatus,
    Hint,
    HintType,
    Play,
    PlayerView,
    Tokens,
    commit_action,
    empty_player,
    get_legal_actions,
    join_game,
    new_game,
)
from hanabiengine.agents.human_agent import HumanAgent, describe_knowledge
from hanabiengine.orchestration.game_runner import GameRunner, advance, start_game


class DiscardingAgent:
    """Always lets the runner pick its default action."""

    def __init__(self, name: str):
        self.name = name
        self.calls = 0

    def get_action(self, player_view, legal_actions, player_index):
        self.calls += 1
        return None


def test_runner_plays_until_actions_run_out() -> None:
    agents = {"p0": DiscardingAgent("A"), "p1": DiscardingAgent("B")}
    result = GameRunner(agents, seed=9).run()
    # 40 cards left after dealing, then players_count + 1 more turns
    assert result.num_turns == 42
    assert result.reason == "actions"
    assert result.score == 0
    assert result.player_ids == ("p0", "p1")
    assert result.final_state.status == GameStatus.OVER
    assert len(result.final_state.discard_pile) == 42
    assert agents["p0"].calls + agents["p1"].calls == 42


def test_runner_respects_max_turns() -> None:
    agents = {"p0": DiscardingAgent("A"), "p1": DiscardingAgent("B"), "p2": DiscardingAgent("C")}
    runner = GameRunner(agents, seed=9, max_turns=5)
    result = runner.run()
    assert result.num_turns == 5
    assert result.reason is None
    assert result.final_state.status == GameStatus.ONGOING
    assert runner.last_state is result.final_state


def test_start_game_needs_full_table() -> None:
    state = new_game(GameOptions(players_count=2, seed=1))
    state = join_game(state, empty_player("a", "A"))
    with pytest.raises(ValueError):
        start_game(state)
    state = join_game(state, empty_player("b", "B"))
    assert start_game(state).status == GameStatus.ONGOING


def test_advance_rejects_lobby() -> None:
    state = new_game(GameOptions(players_count=2, seed=1))
    with pytest.raises(ValueError):
        advance(state, Discard(from_player=state.current_player, card_index=0))


def test_advance_closes_game_on_last_strike(make_state) -> None:
    state = make_state(["B3 R1", "G1"], draw="W1", tokens=Tokens(hints=8, strikes=1))
    state = advance(state, Play(from_player=0, card_index=0, card=card("B3")))
    assert state.tokens.strikes == 0
    assert state.status == GameStatus.OVER
    with pytest.raises(ValueError):
        advance(state, Discard(from_player=1, card_index=0))


def test_human_agent_reprompts_until_valid(monkeypatch, capsys) -> None:
    state = start_game(
        join_game(
            join_game(new_game(GameOptions(players_count=2, seed=2)), empty_player("a", "A")),
            empty_player("b", "B"),
        )
    )
    index = state.current_player
    legal = get_legal_actions(state, index)
    answers = iter(["nope", "99", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    action = HumanAgent("Tester").get_action(PlayerView.from_state(state, index), legal, index)

    assert action is legal[3]
    out = capsys.readouterr().out
    assert "Invalid. Try again." in out
    assert "#0 [blue|red|green|white|yellow 1|2|3|4|5]" in out


def test_describe_knowledge_after_hint(make_state) -> None:
    state = make_state(["R1", "R3"])
    state = commit_action(
        state, Hint(from_player=0, to_player=1, type=HintType.NUMBER, value=3)
    )
    assert describe_knowledge(state.players[1].hand[0].knowledge) == "blue|red|green|white|yellow 3"
    assert describe_knowledge(None) == "?"


class PlayingAgent:
    """Plays the newest card and records what it was offered."""

    def __init__(self, name: str):
        self.name = name
        self.offered = []

    def get_action(self, player_view, legal_actions, player_index):
        self.offered.append(legal_actions)
        return next(a for a in legal_actions if isinstance(a, Play))


def test_runner_keeps_own_hand_hidden_from_agents() -> None:
    agents = {"p0": PlayingAgent("A"), "p1": PlayingAgent("B")}
    runner = GameRunner(agents, seed=2, max_turns=1)
    start = runner.setup()
    own_hand = start.players[start.current_player].hand

    result = runner.run()

    offered = [a for legal in agents["p0"].offered + agents["p1"].offered for a in legal]
    assert offered
    assert all(a.card is None for a in offered if isinstance(a, Play))
    # the runner fills the card in from the hand before committing
    assert f" {own_hand[0]}" in result.final_state.history[-1]
    assert result.num_turns == 1
