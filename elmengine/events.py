"""Window and input events, and dispatching them to typed handlers."""

from __future__ import annotations

import enum
from typing import Callable, ClassVar, TypeVar


class EventType(enum.Enum):
    """The concrete kind of an event."""

    NONE = 0
    WINDOW_CLOSE = enum.auto()
    WINDOW_MINIMIZE = enum.auto()
    WINDOW_RESIZE = enum.auto()
    WINDOW_FOCUS = enum.auto()
    WINDOW_BLUR = enum.auto()
    WINDOW_MOVED = enum.auto()
    KEY_PRESSED = enum.auto()
    KEY_RELEASED = enum.auto()
    KEY_TYPED = enum.auto()
    MOUSE_BUTTON_PRESSED = enum.auto()
    MOUSE_BUTTON_RELEASED = enum.auto()
    MOUSE_MOVED = enum.auto()
    MOUSE_SCROLLED = enum.auto()


class EventCategory(enum.IntFlag):
    """Bit flags grouping event types."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


class Event:
    """Base of all events; ``handled`` marks it as consumed."""

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        self.handled = False

    @property
    def name(self) -> str:
        return f"EVENT_TYPE_{self.event_type.name}"

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler when the event is of a given class."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event matches ``event_class``; report whether it did."""
        if self._event.event_type is not event_class.event_type:
            return False
        self._event.handled |= bool(func(self._event))  # type: ignore[arg-type]
        return True


def _fmt_float(value: float) -> str:
    return f"{value:g}"


# --- Keyboard ---------------------------------------------------------------


class KeyEvent(Event):
    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code

    def __str__(self) -> str:
        return f"{self.name}: {int(self.key_code)}"


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED

    def __init__(self, key_code: int, is_repeat: bool = False) -> None:
        super().__init__(key_code)
        self.is_repeat = is_repeat

    def __str__(self) -> str:
        return f"{self.name}: {int(self.key_code)} (repeat = {int(self.is_repeat)})"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED


# --- Mouse ------------------------------------------------------------------


class MouseButtonEvent(Event):
    category_flags = EventCategory.INPUT | EventCategory.MOUSE | EventCategory.MOUSE_BUTTON

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button

    def __str__(self) -> str:
        return f"{self.name}: {int(self.button)}"


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    category_flags = EventCategory.INPUT | EventCategory.MOUSE

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"{self.name}: {_fmt_float(self.x)}, {_fmt_float(self.y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    category_flags = EventCategory.INPUT | EventCategory.MOUSE

    def __init__(self, offset_x: float, offset_y: float) -> None:
        super().__init__()
        self.offset_x = offset_x
        self.offset_y = offset_y

    def __str__(self) -> str:
        return f"{self.name}: {_fmt_float(self.offset_x)}, {_fmt_float(self.offset_y)}"


# --- Window -----------------------------------------------------------------


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category_flags = EventCategory.APPLICATION


class WindowMinimizeEvent(Event):
    event_type = EventType.WINDOW_MINIMIZE
    category_flags = EventCategory.APPLICATION

    def __init__(self, minimized: bool) -> None:
        super().__init__()
        self.minimized = minimized


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    category_flags = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"{self.name}: {self.width}, {self.height}"