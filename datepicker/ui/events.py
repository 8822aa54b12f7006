"""Input event records handed to the DatePicker handlers."""

from dataclasses import dataclass
from enum import IntEnum


class MouseButton(IntEnum):
    """Mouse buttons, numbered as browsers report them."""

    PRIMARY = 0
    AUXILIARY = 1
    SECONDARY = 2


@dataclass
class MouseEvent:
    """A mouse event. Only ``button`` is consulted by the engine."""

    button: int = MouseButton.PRIMARY

    @property
    def is_primary(self) -> bool:
        return self.button == MouseButton.PRIMARY


@dataclass
class TouchEvent:
    """A touch event carrying the number of active touch points."""

    touches: int = 1

    @property
    def is_single(self) -> bool:
        return self.touches == 1


@dataclass
class KeyEvent:
    """A key-down event.

    Attributes:
        key: Key name as reported by the host (``"ArrowLeft"``, ``"Enter"``, ``" "``...)
        default_prevented: Set once a handler suppresses the host's default behaviour
    """

    key: str
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True
