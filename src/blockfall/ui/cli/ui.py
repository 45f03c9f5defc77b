import atexit
import logging

from ansi import color, cursor

from blockfall.ansi_extensions import cursor as cursorx
from blockfall.ansi_extensions.colour import bg
from blockfall.game_logic.interfaces.ui import UI, GameSnapshot
from blockfall.game_logic.session import GameState
from blockfall.ui.cli.buffered_printing import BufferedPrint

LOGGER = logging.getLogger(__name__)


class CLI(UI):
    _PIXEL_WIDTH = 2  # how many terminal characters together form one cell

    _BACKGROUND_COLOR = "#24243e"
    _PANEL_GAP = "  "

    _STATE_MESSAGES = {
        GameState.NOT_STARTED: "Enter: start   Esc: quit",
        GameState.RUNNING: "Esc: quit",
        GameState.GAME_OVER: "Game over! Enter: play again",
    }

    def __init__(self, *, text_fx: str = str(color.fx.bold)) -> None:
        self._text_fx = text_fx
        self._buffered_print = BufferedPrint()
        self._board_size: tuple[int, int] | None = None

    @staticmethod
    def _cursor_goto(y: int, x: int) -> str:
        # + 1 to make the interface 0-based (index of top CLI row, and left CLI column is actually 1, not 0)
        return cursor.goto(y + 1, x * CLI._PIXEL_WIDTH + 1)

    def initialize(self, board_height: int, board_width: int) -> None:
        self._board_size = (board_height, board_width)
        atexit.register(self.terminate)
        print(cursor.hide("") + cursor.erase(""), end="", flush=True)

    def terminate(self) -> None:
        if self._buffered_print.is_active():
            self._buffered_print.discard_and_reset_buffer()
        print(color.fx.reset + cursor.erase("") + self._cursor_goto(0, 0) + cursor.show(""), end="", flush=True)

    def draw(self, snapshot: GameSnapshot) -> None:
        if self._board_size is None:
            msg = "UI not initialized, cannot draw before initialize() is called!"
            raise RuntimeError(msg)

        if snapshot.board.shape != self._board_size:
            msg = f"Board of shape {snapshot.board.shape} does not match the initialized size {self._board_size}"
            raise ValueError(msg)

        lines = self.compose_lines(snapshot)
        with self._buffered_print:
            for y, line in enumerate(lines):
                print(self._cursor_goto(y, 0) + line + cursorx.erase_line_to_end(""), end="")
            # leave the cursor below the board, so that stray prints don't garble it
            print(self._cursor_goto(len(lines), 0) + color.fx.reset + cursorx.erase_to_end(""), end="")

    def compose_lines(self, snapshot: GameSnapshot) -> list[str]:
        """Render the board, the active piece, and the info panel into one string per board row."""
        height, width = snapshot.board.shape

        piece_cells: set[tuple[int, int]] = set()
        if snapshot.piece is not None:
            ys, xs = snapshot.piece.occupied_cells()
            piece_cells = set(zip(ys.tolist(), xs.tolist(), strict=True))

        panel = self._panel(snapshot)

        lines = []
        for y in range(height):
            parts = []
            for x in range(width):
                if (y, x) in piece_cells:
                    assert snapshot.piece is not None
                    cell_color = snapshot.piece.color
                elif cell_value := int(snapshot.board[y, x]):
                    cell_color = snapshot.cell_colors[cell_value - 1]
                else:
                    cell_color = self._BACKGROUND_COLOR
                parts.append(bg.hex_truecolor(cell_color) + " " * self._PIXEL_WIDTH)

            parts.append(str(color.fx.reset))
            if y < len(panel) and panel[y]:
                parts.append(self._PANEL_GAP + self._text_fx + panel[y] + str(color.fx.reset))

            lines.append("".join(parts))

        return lines

    def _panel(self, snapshot: GameSnapshot) -> list[str]:
        return [
            f"Score: {snapshot.score}",
            f"Level: {snapshot.level}",
            f"Lines: {snapshot.lines_cleared}",
            f"Combo: {snapshot.combo}" if snapshot.combo > 1 else "",
            "",
            self._STATE_MESSAGES[snapshot.state],
        ]
