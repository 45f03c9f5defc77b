from abc import ABC, abstractmethod
from enum import Enum, auto


class Action(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    ROTATE = auto()


class Controller(ABC):
    @abstractmethod
    def get_actions(self) -> list[Action]:
        """Return all actions that arrived since the last call, oldest first."""

    def restart_requested(self) -> bool:
        return False

    def quit_requested(self) -> bool:
        return False
