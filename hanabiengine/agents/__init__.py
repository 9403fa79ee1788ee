"""Built-in agents."""

from hanabiengine.agents.human_agent import HumanAgent

__all__ = ["HumanAgent"]
