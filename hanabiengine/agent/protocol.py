"""Agent protocol - interface that seat controllers implement."""

from typing import Protocol

from hanabiengine.engine import Action, PlayerView


class AgentProtocol(Protocol):
    """Interface for whatever picks actions for one seat."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: What this seat can see: others' hands, its own knowledge.
            legal_actions: List of valid actions to choose from.
            player_index: This agent's seat.

        Returns:
            One of the legal actions, or None to discard the oldest card.
        """
        ...
