"""Game orchestration."""

from hanabiengine.orchestration.game_runner import GameResult, GameRunner

__all__ = ["GameResult", "GameRunner"]
