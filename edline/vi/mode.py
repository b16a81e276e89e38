"""Vi-style input parsing with separate normal and insert modes."""

from __future__ import annotations

import enum

from edline.edit_mode import EditMode, PromptEditMode
from edline.enums import EditCommand, EditCommandKind, ReedlineEvent, ReedlineEventKind
from edline.events import (
    FocusGained,
    FocusLost,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    MouseEvent,
    PasteEvent,
    ReedlineRawEvent,
    ResizeEvent,
)
from edline.keybindings import (
    Keybindings,
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    edit_bind,
)
from edline.vi.motion import ViCharSearch
from edline.vi.parser import parse

_TYPING_MODIFIERS = (
    KeyModifiers.NONE,
    KeyModifiers.SHIFT,
    KeyModifiers.CONTROL | KeyModifiers.ALT,
    KeyModifiers.CONTROL | KeyModifiers.ALT | KeyModifiers.SHIFT,
)


def _ascii_lower(c: str) -> str:
    return c.lower() if c.isascii() else c


def _ascii_upper(c: str) -> str:
    return c.upper() if c.isascii() else c


def _none_event() -> ReedlineEvent:
    return ReedlineEvent(ReedlineEventKind.NONE)


def default_vi_normal_keybindings() -> Keybindings:
    """The default keybindings of vi normal mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    # Replicate vi's default behaviour for Backspace and Delete
    kb.add_binding(KeyModifiers.NONE, KeyCode.BACKSPACE, edit_bind(EditCommand(EditCommandKind.MOVE_LEFT)))
    kb.add_binding(KeyModifiers.NONE, KeyCode.DELETE, edit_bind(EditCommand(EditCommandKind.DELETE)))
    return kb


def default_vi_insert_keybindings() -> Keybindings:
    """The default keybindings of vi insert mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)
    return kb


class ViMode(enum.Enum):
    """The two vi editing modes."""

    NORMAL = "Normal"
    INSERT = "Insert"


class Vi(EditMode):
    """Parses input events like a vi-style editor; starts in insert mode."""

    def __init__(
        self,
        insert_keybindings: Keybindings | None = None,
        normal_keybindings: Keybindings | None = None,
    ) -> None:
        self.insert_keybindings = (
            insert_keybindings if insert_keybindings is not None else default_vi_insert_keybindings()
        )
        self.normal_keybindings = (
            normal_keybindings if normal_keybindings is not None else default_vi_normal_keybindings()
        )
        self.cache: list[str] = []
        self.mode = ViMode.INSERT
        self.previous: ReedlineEvent | None = None
        # last f, F, t, T motion for ; and ,
        self.last_char_search: ViCharSearch | None = None

    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        inner = event.into_event()
        if isinstance(inner, KeyEvent):
            return self._parse_key(inner.modifiers, inner.code)
        if isinstance(inner, MouseEvent):
            return ReedlineEvent(ReedlineEventKind.MOUSE)
        if isinstance(inner, ResizeEvent):
            return ReedlineEvent(ReedlineEventKind.RESIZE, inner.width, inner.height)
        if isinstance(inner, (FocusGained, FocusLost)):
            return _none_event()
        if isinstance(inner, PasteEvent):
            text = inner.text.replace("\r\n", "\n").replace("\r", "\n")
            return edit_bind(EditCommand(EditCommandKind.INSERT_STRING, text))
        raise TypeError(f"unsupported event {inner!r}")

    def _parse_key(self, modifier: KeyModifiers, code: KeyCode) -> ReedlineEvent:
        if code.is_char:
            if self.mode is ViMode.NORMAL:
                return self._parse_normal_char(modifier, code.char)
            return self._parse_insert_char(modifier, code.char)
        if modifier == KeyModifiers.NONE and code == KeyCode.ESC:
            self.cache.clear()
            self.mode = ViMode.NORMAL
            return ReedlineEvent(
                ReedlineEventKind.MULTIPLE,
                [ReedlineEvent(ReedlineEventKind.ESC), ReedlineEvent(ReedlineEventKind.REPAINT)],
            )
        if modifier == KeyModifiers.NONE and code == KeyCode.ENTER:
            self.mode = ViMode.INSERT
            return ReedlineEvent(ReedlineEventKind.ENTER)
        bindings = self.normal_keybindings if self.mode is ViMode.NORMAL else self.insert_keybindings
        found = bindings.find_binding(modifier, code)
        return found if found is not None else _none_event()

    def _parse_normal_char(self, modifier: KeyModifiers, char: str) -> ReedlineEvent:
        c = _ascii_lower(char)
        found = self.normal_keybindings.find_binding(modifier, KeyCode.of_char(c))
        if found is not None:
            return found
        if modifier not in (KeyModifiers.NONE, KeyModifiers.SHIFT):
            return _none_event()

        self.cache.append(_ascii_upper(c) if modifier == KeyModifiers.SHIFT else c)
        result = parse(self.cache)
        if not result.is_valid():
            self.cache.clear()
            return _none_event()
        if not result.is_complete():
            return _none_event()
        if result.enters_insert_mode():
            self.mode = ViMode.INSERT
        event = result.to_reedline_event(self)
        self.cache.clear()
        return event

    def _parse_insert_char(self, modifier: KeyModifiers, char: str) -> ReedlineEvent:
        # Mixed modifiers (e.g. Ctrl+Alt for AltGr) are used by non-US keyboards to type characters.
        c = char if modifier == KeyModifiers.NONE else _ascii_lower(char)
        found = self.insert_keybindings.find_binding(modifier, KeyCode.of_char(c))
        if found is not None:
            return found
        if modifier in _TYPING_MODIFIERS:
            typed = _ascii_upper(c) if modifier == KeyModifiers.SHIFT else c
            return edit_bind(EditCommand(EditCommandKind.INSERT_CHAR, typed))
        return _none_event()

    def edit_mode(self) -> PromptEditMode:
        if self.mode is ViMode.NORMAL:
            return PromptEditMode.VI_NORMAL
        return PromptEditMode.VI_INSERT