"""Unit tests for game history logging."""

from conftest import card
from hanabiengine.engine import (
    Color,
    Discard,
    GameOptions,
    Hint,
    HintType,
    Play,
    commit_action,
    empty_player,
    join_game,
    new_game,
)


def test_history_initialization():
    state = new_game(GameOptions(players_count=2, seed=1))
    assert len(state.history) == 0


def test_history_records_join():
    state = new_game(GameOptions(players_count=2, seed=1))
    state = join_game(state, empty_player("alice", "Alice"))
    assert state.history == ("alice joined",)


def test_history_records_play(make_state):
    state = make_state(["R1 B2", "G1 G2"])
    state = commit_action(state, Play(from_player=0, card_index=0, card=card("R1")))
    assert state.history == ("p0 played red 1",)


def test_history_records_misplay(make_state):
    state = make_state(["B2 R1", "G1 G2"])
    state = commit_action(state, Play(from_player=0, card_index=0, card=card("B2")))
    assert state.history[-1] == "p0 misplayed blue 2 (strike)"


def test_history_records_hint(make_state):
    state = make_state(["R1 B2", "G1 B1 G2"])
    state = commit_action(
        state, Hint(from_player=0, to_player=1, type=HintType.COLOR, value=Color.GREEN)
    )
    assert state.history[-1] == "p0 hinted p1 about green: positions [0, 2]"


def test_history_persists_across_turns(make_state):
    state = make_state(["R1 B2", "G1 G2"])
    state = commit_action(state, Discard(from_player=0, card_index=1))
    state = commit_action(state, Hint(from_player=1, to_player=0, type=HintType.NUMBER, value=1))

    assert len(state.history) == 2
    assert state.history[0] == "p0 discarded blue 2"
    assert state.history[1] == "p1 hinted p0 about 1: positions [0]"
