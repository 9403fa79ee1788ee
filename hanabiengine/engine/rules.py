"""Hanabi rules: game setup, legal actions and state transitions."""

import random
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Sequence, Union

from hanabiengine.engine.card import NUMBERS, BASE_COLORS, Card, Color, HintType
from hanabiengine.engine.deck import create_deck, shuffle_seeded
from hanabiengine.engine.game_state import (
    MAX_HINTS,
    GameOptions,
    GameState,
    GameStatus,
    Player,
    Tokens,
)
from hanabiengine.engine.knowledge import apply_hint, empty_hint, hinted_indexes

STARTING_HAND_SIZE = {2: 5, 3: 5, 4: 4, 5: 4}


class IllegalActionError(ValueError):
    """An action the current state does not allow (wrong turn, self-hint, no hint token...)."""


@dataclass
class Discard:
    """Action: discard the card at card_index and regain a hint token."""

    from_player: int
    card_index: int


@dataclass
class Play:
    """Action: play the card at card_index.

    card is what the player claims it is. Left unset, the card in hand is used;
    that is how actions offered to a player keep their own hand hidden.
    """

    from_player: int
    card_index: int
    card: Optional[Card] = None


@dataclass
class Hint:
    """Action: tell to_player which of their cards have (or lack) one color or number."""

    from_player: int
    to_player: int
    type: HintType
    value: Union[Color, int]


Action = Union[Discard, Play, Hint]


def is_playable(card: Card, played_cards: Sequence[Card]) -> bool:
    """Whether card can go on the played piles.

    Either it is a 1 or its same-color predecessor has been played, and the
    very same card (color and number) is not already there.
    """
    is_previous_here = card.number == 1 or any(
        c.color == card.color and c.number == card.number - 1 for c in played_cards
    )
    is_same_not_here = card not in played_cards
    return is_previous_here and is_same_not_here


def empty_player(id: str, name: str) -> Player:
    """A player who has not joined a table yet."""
    return Player(id=id, name=name)


def new_game(options: GameOptions) -> GameState:
    """Create the lobby state: shuffled deck, full tokens, no players yet.

    The seed picks both the deck order and the starting player. When the
    options carry no seed, one is drawn and stored in the returned state.
    """
    if not 1 < options.players_count < 6:
        raise ValueError(f"players_count must be between 2 and 5, got {options.players_count}")
    if options.seed is None:
        options = replace(options, seed=random.randint(0, 2**31 - 1))

    deck = create_deck(multicolor=options.multicolor, seed=options.seed)
    current_player = shuffle_seeded(range(options.players_count), options.seed)[0]

    return GameState(
        status=GameStatus.LOBBY,
        players_count=options.players_count,
        played_cards=(),
        draw_pile=tuple(deck),
        discard_pile=(),
        players=(),
        tokens=Tokens(),
        current_player=current_player,
        options=options,
        # decreased once the draw pile is empty
        actions_left=options.players_count + 1,
    )


def join_game(state: GameState, player: Player) -> GameState:
    """Seat player at the table and deal their starting hand from the front of the draw pile."""
    if len(state.players) >= state.players_count:
        raise ValueError(f"Game already has {state.players_count} players")

    size = STARTING_HAND_SIZE[state.players_count]
    knowledge = empty_hint(state.options)
    hand = tuple(c.with_knowledge(knowledge) for c in state.draw_pile[:size])
    seated = replace(player, hand=hand, index=len(state.players))

    return replace(
        state,
        draw_pile=state.draw_pile[size:],
        players=state.players + (seated,),
        history=state.history + (f"{player.id} joined",),
    )


def _check_card_index(player: Player, card_index: int) -> None:
    if not 0 <= card_index < len(player.hand):
        raise IllegalActionError(
            f"Card index {card_index} out of range for a hand of {len(player.hand)}"
        )


def _check_hint(state: GameState, hint: Hint) -> None:
    if hint.from_player == hint.to_player:
        raise IllegalActionError("A player cannot hint themselves")
    if state.tokens.hints <= 0:
        raise IllegalActionError("No hint token left")
    if not 0 <= hint.to_player < len(state.players):
        raise IllegalActionError(f"Unknown player {hint.to_player}")
    try:
        hint_type = HintType(hint.type)
    except ValueError:
        raise IllegalActionError(f"Invalid hint type: {hint.type!r}") from None
    if hint_type == HintType.COLOR:
        try:
            color = Color(hint.value)
        except ValueError:
            raise IllegalActionError(f"Invalid color hint: {hint.value!r}") from None
        if color == Color.MULTICOLOR and not state.options.multicolor:
            raise IllegalActionError("Multicolor is not enabled in this game")
    elif isinstance(hint.value, bool) or hint.value not in NUMBERS:
        raise IllegalActionError(f"Invalid number hint: {hint.value!r}")


def commit_action(state: GameState, action: Action) -> GameState:
    """Apply an action and return the new game state.

    The input state is left as it is. Game over is not checked here; use
    is_game_over on the result.
    """
    if action.from_player != state.current_player:
        raise IllegalActionError(
            f"Player {action.from_player} acted during player {state.current_player}'s turn"
        )
    if not 0 <= action.from_player < len(state.players):
        raise IllegalActionError(f"Player {action.from_player} has not joined the game")

    players = list(state.players)
    player = players[action.from_player]
    played = state.played_cards
    discard = state.discard_pile
    draw = state.draw_pile
    tokens = state.tokens
    history = list(state.history)

    if isinstance(action, (Discard, Play)):
        _check_card_index(player, action.card_index)
        hand = list(player.hand)
        card = hand.pop(action.card_index)

        if isinstance(action, Play):
            if is_playable(card, played):
                played = played + (card,)
                history.append(f"{player.id} played {card}")
                if card.number == 5:
                    # completing a color wins a hint back
                    tokens = replace(tokens, hints=tokens.hints + 1)
            else:
                tokens = replace(tokens, strikes=tokens.strikes - 1)
                supplied = action.card if action.card is not None else card
                discard = discard + (supplied,)
                history.append(f"{player.id} misplayed {supplied} (strike)")
        else:
            discard = discard + (card,)
            if tokens.hints < MAX_HINTS:
                tokens = replace(tokens, hints=tokens.hints + 1)
            history.append(f"{player.id} discarded {card}")

        # in both cases the hand gets a new card if there is one left
        if draw:
            new_card = draw[-1].with_knowledge(empty_hint(state.options))
            draw = draw[:-1]
            hand.insert(0, new_card)

        players[action.from_player] = replace(player, hand=tuple(hand))

    elif isinstance(action, Hint):
        _check_hint(state, action)
        tokens = replace(tokens, hints=tokens.hints - 1)
        target = players[action.to_player]
        touched = hinted_indexes(target.hand, action)
        players[action.to_player] = replace(
            target, hand=apply_hint(target.hand, action, state.options)
        )
        value = action.value.value if isinstance(action.value, Color) else action.value
        history.append(f"{player.id} hinted {target.id} about {value}: positions {touched}")

    else:
        raise IllegalActionError(f"Unknown action: {action!r}")

    actions_left = state.actions_left
    # no card left in the pile (or the last one was just drawn)
    if not draw:
        actions_left -= 1

    return replace(
        state,
        players=tuple(players),
        played_cards=played,
        discard_pile=discard,
        draw_pile=draw,
        tokens=tokens,
        actions_left=actions_left,
        current_player=(state.current_player + 1) % state.options.players_count,
        history=tuple(history),
    )


def get_legal_actions(state: GameState, player_index: int) -> List[Action]:
    """Return every action commit_action accepts from player_index right now."""
    if state.current_player != player_index:
        return []
    if not 0 <= player_index < len(state.players):
        return []

    hand = state.player(player_index).hand
    actions: List[Action] = []
    # the player does not see their own cards, so plays carry no card
    for i in range(len(hand)):
        actions.append(Play(from_player=player_index, card_index=i))
    for i in range(len(hand)):
        actions.append(Discard(from_player=player_index, card_index=i))

    if state.tokens.hints <= 0:
        return actions

    colors = list(BASE_COLORS)
    if state.options.multicolor:
        colors.append(Color.MULTICOLOR)
    for target in range(len(state.players)):
        if target == player_index:
            continue
        for color in colors:
            actions.append(
                Hint(from_player=player_index, to_player=target, type=HintType.COLOR, value=color)
            )
        for number in NUMBERS:
            actions.append(
                Hint(from_player=player_index, to_player=target, type=HintType.NUMBER, value=number)
            )
    return actions


def action_to_dict(action: Action) -> Dict[str, Any]:
    """Wire form of an action, tagged by its "action" field."""
    if isinstance(action, Discard):
        return {"action": "discard", "from": action.from_player, "cardIndex": action.card_index}
    if isinstance(action, Play):
        data = {"action": "play", "from": action.from_player, "cardIndex": action.card_index}
        if action.card is not None:
            data["card"] = {"color": action.card.color.value, "number": action.card.number}
        return data
    if isinstance(action, Hint):
        hint_type = HintType(action.type)
        value = Color(action.value).value if hint_type == HintType.COLOR else int(action.value)
        return {
            "action": "hint",
            "from": action.from_player,
            "to": action.to_player,
            "type": hint_type.value,
            "value": value,
        }
    raise ValueError(f"Unknown action: {action!r}")


def action_from_dict(data: Dict[str, Any]) -> Action:
    kind = data.get("action")
    if kind == "discard":
        return Discard(from_player=int(data["from"]), card_index=int(data["cardIndex"]))
    if kind == "play":
        return Play(
            from_player=int(data["from"]),
            card_index=int(data["cardIndex"]),
            card=Card.from_dict(data["card"]) if data.get("card") is not None else None,
        )
    if kind == "hint":
        hint_type = HintType(data["type"])
        value = Color(data["value"]) if hint_type == HintType.COLOR else int(data["value"])
        return Hint(
            from_player=int(data["from"]),
            to_player=int(data["to"]),
            type=hint_type,
            value=value,
        )
    raise ValueError(f"Unknown action type: {kind!r}")
