import logging
import queue
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

from pynput import keyboard

from blockfall.game_logic.interfaces.controller import Action, Controller

LOGGER = logging.getLogger(__name__)

KeyRepr: TypeAlias = keyboard.Key | str


class PynputKeyboardController(Controller):
    """Keyboard input via a pynput listener thread.

    Every key press becomes one discrete action, queued until the game loop collects it. Holding a key produces
    repeated presses at the operating system's key repeat rate.
    """

    KEY_TO_ACTION: Mapping[KeyRepr, Action] = MappingProxyType(
        {
            keyboard.Key.left: Action.MOVE_LEFT,
            keyboard.Key.right: Action.MOVE_RIGHT,
            keyboard.Key.down: Action.SOFT_DROP,
            keyboard.Key.up: Action.ROTATE,
            "a": Action.MOVE_LEFT,
            "d": Action.MOVE_RIGHT,
            "s": Action.SOFT_DROP,
            "w": Action.ROTATE,
        }
    )
    RESTART_KEYS: frozenset[KeyRepr] = frozenset({keyboard.Key.enter, keyboard.Key.space})
    QUIT_KEYS: frozenset[KeyRepr] = frozenset({keyboard.Key.esc})

    def __init__(self) -> None:
        self._actions: queue.Queue[Action] = queue.Queue()
        self._restart_requested = threading.Event()
        self._quit_requested = threading.Event()

        self._listener = keyboard.Listener(on_press=self._on_press)
        self._listener.start()

    def stop(self) -> None:
        self._listener.stop()

    def get_actions(self) -> list[Action]:
        actions = []
        while True:
            try:
                actions.append(self._actions.get_nowait())
            except queue.Empty:
                return actions

    def restart_requested(self) -> bool:
        if self._restart_requested.is_set():
            self._restart_requested.clear()
            return True
        return False

    def quit_requested(self) -> bool:
        return self._quit_requested.is_set()

    def _on_press(self, key: keyboard.Key | keyboard.KeyCode | None) -> None:
        if key is None:
            return

        key_repr = self._parse_key(key)
        if key_repr is None:
            return

        if (action := self.KEY_TO_ACTION.get(key_repr)) is not None:
            self._actions.put(action)
        elif key_repr in self.RESTART_KEYS:
            self._restart_requested.set()
        elif key_repr in self.QUIT_KEYS:
            LOGGER.info("Quit key pressed")
            self._quit_requested.set()

    def _parse_key(self, key: keyboard.Key | keyboard.KeyCode) -> KeyRepr | None:
        key = self._listener.canonical(key)

        if isinstance(key, keyboard.Key):
            return key

        return key.char
