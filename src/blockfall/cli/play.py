import logging

import click

from blockfall.cli.common import BoardSize
from blockfall.clock.simple import SimpleClock
from blockfall.config import GameConfig
from blockfall.game_logic.game import Game
from blockfall.game_logic.runtime import Runtime
from blockfall.ui.cli.ui import CLI

LOGGER = logging.getLogger(__name__)


@click.command()
@click.option(
    "--board-size",
    type=BoardSize(),
    default="30x14",
    show_default=True,
    help="Height and width of the board, separated by 'x'.",
)
@click.option("--seed", type=int, default=None, help="Seed for the piece generator, for reproducible games.")
@click.option(
    "--fps", type=click.FloatRange(min=1), default=60, show_default=True, help="Frames drawn per second."
)
def play(board_size: tuple[int, int], seed: int | None, fps: float) -> None:
    """Play a game in the terminal: arrows or WASD to move and rotate, Enter to (re)start, Esc to quit."""
    height, width = board_size
    try:
        game = Game(config=GameConfig(board_height=height, board_width=width), seed=seed)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--board-size'") from e

    # pynput connects to the display server on import, so only import it when a game is actually played
    from blockfall.controllers.pynput_keyboard import PynputKeyboardController

    LOGGER.info("Playing on a %dx%d board with seed %s at %s FPS", height, width, seed, fps)

    controller = PynputKeyboardController()
    try:
        Runtime(game=game, ui=CLI(), clock=SimpleClock(fps=fps), controller=controller).run()
    finally:
        controller.stop()
