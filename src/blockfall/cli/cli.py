from pathlib import Path

import click

from blockfall.cli.play import play
from blockfall.logging_config import DEFAULT_LOG_DIR, configure_logging


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_LOG_DIR,
    show_default=True,
    help="Directory for the rotating log files.",
)
@click.option(
    "--debug-log/--no-debug-log",
    default=True,
    show_default=True,
    help="Also write a debug.log with every spawn, lock, and row clear.",
)
def cli(log_dir: Path, debug_log: bool) -> None:
    """A falling-block puzzle game for the terminal."""
    configure_logging(log_dir, debug_log=debug_log)


cli.add_command(play)
