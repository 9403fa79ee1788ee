"""Human agent - reads actions from terminal."""

from typing import Optional

from hanabiengine.engine import Action, CardKnowledge, PlayerView
from hanabiengine.engine.rules import Discard, Play


def describe_knowledge(knowledge: Optional[CardKnowledge]) -> str:
    """Short text of what a card's holder knows, e.g. "red|green 3"."""
    if knowledge is None:
        return "?"
    color = knowledge.certain_color()
    colors = color.value if color else "|".join(c.value for c in knowledge.possible_colors())
    number = knowledge.certain_number()
    numbers = str(number) if number else "|".join(str(n) for n in knowledge.possible_numbers())
    return f"{colors} {numbers}"


def describe_action(action: Action) -> str:
    if isinstance(action, Play):
        return f"PLAY card #{action.card_index}"
    if isinstance(action, Discard):
        return f"DISCARD card #{action.card_index}"
    value = getattr(action.value, "value", action.value)
    return f"HINT player {action.to_player} about {value}"


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        if not legal_actions:
            return None

        print(f"\n--- {self._name}'s turn ---")
        print(
            f"Hints: {player_view.tokens.hints}  Strikes left: {player_view.tokens.strikes}"
            f"  Draw pile: {player_view.draw_pile_size}"
        )
        print("Played:", " ".join(str(c) for c in player_view.played_cards) or "-")
        for index, hand in player_view.other_hands.items():
            print(f"Player {index}:", ", ".join(str(c) for c in hand))
        print(
            "Your hand:",
            ", ".join(
                f"#{i} [{describe_knowledge(k)}]" for i, k in enumerate(player_view.my_knowledge)
            ),
        )
        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            print(f"  {i}: {describe_action(a)}")

        while True:
            try:
                raw = input("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    return legal_actions[idx]
            except ValueError:
                pass
            except EOFError:
                return None
            print("Invalid. Try again.")
