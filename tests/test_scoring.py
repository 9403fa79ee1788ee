"""Tests for end-of-game queries."""

from dataclasses import replace

from conftest import cards
from hanabiengine.engine import (
    Color,
    Tokens,
    game_over_reason,
    get_played_cards_pile,
    get_score,
    is_game_over,
)

FULL = " ".join(f"{c}{n}" for c in "BRGWY" for n in range(1, 6))


def test_fresh_game_is_not_over(make_state) -> None:
    state = make_state(["R1", "B1"])
    assert not is_game_over(state)
    assert game_over_reason(state) is None


def test_no_strikes_left_ends_game(make_state) -> None:
    state = make_state(["R1", "B1"], tokens=Tokens(hints=8, strikes=0))
    assert is_game_over(state)
    assert game_over_reason(state) == "strikes"


def test_no_actions_left_ends_game(make_state) -> None:
    state = make_state(["R1", "B1"], actions_left=0)
    assert is_game_over(state)
    assert game_over_reason(state) == "actions"


def test_all_fireworks_end_game(make_state) -> None:
    state = make_state(["R1", "B1"], played=FULL)
    assert get_score(state) == 25
    assert is_game_over(state)
    assert game_over_reason(state) == "fireworks"


def test_multicolor_needs_thirty(make_state) -> None:
    state = make_state(["R1", "B1"], played=FULL, multicolor=True)
    assert not is_game_over(state)
    state = replace(state, played_cards=state.played_cards + cards("M1 M2 M3 M4 M5"))
    assert is_game_over(state)


def test_get_score_counts_played_cards(make_state) -> None:
    assert get_score(make_state(["R1", "B1"])) == 0
    assert get_score(make_state(["R1", "B1"], played="R1 R2 B1")) == 3


def test_get_played_cards_pile(make_state) -> None:
    state = make_state(["R1", "B1"], played="R1 B1 R2 R3 Y1")
    assert get_played_cards_pile(state) == {Color.RED: 3, Color.BLUE: 1, Color.YELLOW: 1}
    assert get_played_cards_pile(make_state(["R1", "B1"])) == {}
