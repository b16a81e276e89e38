"""Terminal input events and their normalisation for the editor."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, replace
from typing import ClassVar, Union

_NAMED_KEYS = frozenset(
    {
        "Backspace",
        "Enter",
        "Left",
        "Right",
        "Up",
        "Down",
        "Home",
        "End",
        "PageUp",
        "PageDown",
        "Tab",
        "BackTab",
        "Delete",
        "Insert",
        "Null",
        "Esc",
        "CapsLock",
        "ScrollLock",
        "NumLock",
        "PrintScreen",
        "Pause",
        "Menu",
        "KeypadBegin",
    }
)
_FUNCTION_KEY = re.compile(r"F([1-9][0-9]{0,2})")
_CHAR = "Char"


@dataclass(frozen=True)
class KeyCode:
    """A key: either a named key such as ``Enter`` or ``F5``, or a character."""

    name: str
    char: str | None = None

    BACKSPACE: ClassVar[KeyCode]
    ENTER: ClassVar[KeyCode]
    LEFT: ClassVar[KeyCode]
    RIGHT: ClassVar[KeyCode]
    UP: ClassVar[KeyCode]
    DOWN: ClassVar[KeyCode]
    HOME: ClassVar[KeyCode]
    END: ClassVar[KeyCode]
    PAGE_UP: ClassVar[KeyCode]
    PAGE_DOWN: ClassVar[KeyCode]
    TAB: ClassVar[KeyCode]
    BACK_TAB: ClassVar[KeyCode]
    DELETE: ClassVar[KeyCode]
    INSERT: ClassVar[KeyCode]
    NULL: ClassVar[KeyCode]
    ESC: ClassVar[KeyCode]

    def __post_init__(self) -> None:
        if self.name == _CHAR:
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise ValueError(f"a character key needs exactly one character, got {self.char!r}")
            return
        if self.char is not None:
            raise ValueError(f"key {self.name!r} carries no character")
        match = _FUNCTION_KEY.fullmatch(self.name)
        if self.name not in _NAMED_KEYS and not (match and int(match.group(1)) <= 255):
            raise ValueError(f"unknown key {self.name!r}")

    @classmethod
    def of_char(cls, c: str) -> KeyCode:
        """The key that types the character ``c``."""
        return cls(_CHAR, c)

    @property
    def is_char(self) -> bool:
        return self.name == _CHAR

    def __str__(self) -> str:
        return f"Char({self.char})" if self.is_char else self.name


KeyCode.BACKSPACE = KeyCode("Backspace")
KeyCode.ENTER = KeyCode("Enter")
KeyCode.LEFT = KeyCode("Left")
KeyCode.RIGHT = KeyCode("Right")
KeyCode.UP = KeyCode("Up")
KeyCode.DOWN = KeyCode("Down")
KeyCode.HOME = KeyCode("Home")
KeyCode.END = KeyCode("End")
KeyCode.PAGE_UP = KeyCode("PageUp")
KeyCode.PAGE_DOWN = KeyCode("PageDown")
KeyCode.TAB = KeyCode("Tab")
KeyCode.BACK_TAB = KeyCode("BackTab")
KeyCode.DELETE = KeyCode("Delete")
KeyCode.INSERT = KeyCode("Insert")
KeyCode.NULL = KeyCode("Null")
KeyCode.ESC = KeyCode("Esc")


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key press; combine with ``|``."""

    NONE = 0
    SHIFT = 0b1
    CONTROL = 0b10
    ALT = 0b100
    SUPER = 0b1000
    HYPER = 0b1_0000
    META = 0b10_0000


class KeyEventKind(enum.Enum):
    """Whether a key was pressed, held down, or released."""

    PRESS = "Press"
    REPEAT = "Repeat"
    RELEASE = "Release"


@dataclass(frozen=True)
class KeyEvent:
    """A key press, repeat or release."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at a terminal cell."""

    kind: str
    column: int
    row: int
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""

    width: int
    height: int


@dataclass(frozen=True)
class FocusGained:
    """The terminal window gained focus."""


@dataclass(frozen=True)
class FocusLost:
    """The terminal window lost focus."""


@dataclass(frozen=True)
class PasteEvent:
    """Text pasted in bracketed-paste mode."""

    text: str


Event = Union[KeyEvent, MouseEvent, ResizeEvent, FocusGained, FocusLost, PasteEvent]


@dataclass(frozen=True)
class ReedlineRawEvent:
    """A terminal event with key releases dropped and repeats turned into presses."""

    event: Event

    @classmethod
    def convert_from(cls, evt: Event) -> ReedlineRawEvent | None:
        """Wrap ``evt``; returns None for a key release."""
        if isinstance(evt, KeyEvent):
            if evt.kind is KeyEventKind.RELEASE:
                return None
            if evt.kind is KeyEventKind.REPEAT:
                return cls(replace(evt, kind=KeyEventKind.PRESS))
        return cls(evt)

    def into_event(self) -> Event:
        """The wrapped terminal event."""
        return self.event