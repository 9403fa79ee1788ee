"""CLI entry point."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Hanabi rules engine")


def _options(players: int, multicolor: bool, seed: Optional[int]):
    from hanabiengine.engine import GameOptions

    if not 1 < players < 6:
        raise typer.BadParameter(f"Hanabi is played by 2 to 5 players, got {players}.")
    return GameOptions(players_count=players, multicolor=multicolor, seed=seed)


@app.command()
def new(
    players: int = typer.Option(
        3, "--players", "-n", envvar="HANABI_PLAYERS", help="Number of players (2-5)"
    ),
    multicolor: bool = typer.Option(
        False, "--multicolor/--no-multicolor", envvar="HANABI_MULTICOLOR", help="Add the multicolor suit"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="HANABI_SEED", help="Random seed"),
) -> None:
    """Print a fresh game, every seat joined, as JSON."""
    from hanabiengine.engine import empty_player, join_game, new_game

    state = new_game(_options(players, multicolor, seed))
    for i in range(players):
        state = join_game(state, empty_player(f"p{i}", f"Player {i}"))
    typer.echo(json.dumps(state.to_dict(), indent=2))


@app.command()
def play(
    players: int = typer.Option(
        2, "--players", "-n", envvar="HANABI_PLAYERS", help="Number of players (2-5)"
    ),
    multicolor: bool = typer.Option(
        False, "--multicolor/--no-multicolor", envvar="HANABI_MULTICOLOR", help="Add the multicolor suit"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="HANABI_SEED", help="Random seed"),
) -> None:
    """Run a hot-seat game on this terminal."""
    from hanabiengine.agents.human_agent import HumanAgent
    from hanabiengine.orchestration.game_runner import GameRunner

    _options(players, multicolor, seed)
    agents = {f"p{i}": HumanAgent(name=f"Player {i}") for i in range(players)}
    runner = GameRunner(agents, multicolor=multicolor, seed=seed)
    result = runner.run()
    for line in result.final_state.history[-5:]:
        typer.echo(f"> {line}")
    typer.echo(f"Score: {result.score}")
    typer.echo(f"Ended by: {result.reason or 'turn limit'}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def score(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Game state JSON file"),
) -> None:
    """Show score and piles of a saved game state."""
    from hanabiengine.engine import GameState, get_played_cards_pile, get_score, is_game_over

    try:
        state = GameState.from_dict(json.loads(path.read_text()))
    except (KeyError, TypeError, ValueError) as e:
        typer.echo(f"Invalid game state: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Score: {get_score(state)}")
    for color, number in get_played_cards_pile(state).items():
        typer.echo(f"  {color.value}: {number}")
    typer.echo(f"Game over: {'yes' if is_game_over(state) else 'no'}")


if __name__ == "__main__":
    app()
