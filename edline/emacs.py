"""Emacs-style input parsing."""

from __future__ import annotations

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


def _normalise_paste(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def default_emacs_keybindings() -> Keybindings:
    """The default emacs keybindings."""
    E = ReedlineEventKind
    EC = EditCommandKind
    KM = KeyModifiers

    def edit(kind: EditCommandKind) -> ReedlineEvent:
        return edit_bind(EditCommand(kind))

    def until_found(*events: ReedlineEvent) -> ReedlineEvent:
        return ReedlineEvent(E.UNTIL_FOUND, events)

    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)

    # This could be in common, but in Vi it also changes the mode
    kb.add_binding(KM.NONE, KeyCode.ENTER, ReedlineEvent(E.ENTER))

    # Ctrl: moves
    kb.add_binding(
        KM.CONTROL,
        KeyCode.of_char("b"),
        until_found(ReedlineEvent(E.MENU_LEFT), ReedlineEvent(E.LEFT)),
    )
    kb.add_binding(
        KM.CONTROL,
        KeyCode.of_char("f"),
        until_found(
            ReedlineEvent(E.HISTORY_HINT_COMPLETE),
            ReedlineEvent(E.MENU_RIGHT),
            ReedlineEvent(E.RIGHT),
        ),
    )
    # Ctrl: undo/redo
    kb.add_binding(KM.CONTROL, KeyCode.of_char("g"), edit(EC.REDO))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("z"), edit(EC.UNDO))
    # Ctrl: cutting
    kb.add_binding(KM.CONTROL, KeyCode.of_char("y"), edit(EC.PASTE_CUT_BUFFER_BEFORE))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("w"), edit(EC.CUT_WORD_LEFT))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("k"), edit(EC.CUT_TO_END))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("u"), edit(EC.CUT_FROM_START))
    # Ctrl: edits
    kb.add_binding(KM.CONTROL, KeyCode.of_char("t"), edit(EC.SWAP_GRAPHEMES))

    # Alt: moves
    word_right = until_found(ReedlineEvent(E.HISTORY_HINT_WORD_COMPLETE), edit(EC.MOVE_WORD_RIGHT))
    kb.add_binding(KM.ALT, KeyCode.LEFT, edit(EC.MOVE_WORD_LEFT))
    kb.add_binding(KM.ALT, KeyCode.RIGHT, word_right)
    kb.add_binding(KM.ALT, KeyCode.of_char("b"), edit(EC.MOVE_WORD_LEFT))
    kb.add_binding(KM.ALT, KeyCode.of_char("f"), word_right)
    # Alt: edits
    kb.add_binding(KM.ALT, KeyCode.DELETE, edit(EC.DELETE_WORD))
    kb.add_binding(KM.ALT, KeyCode.BACKSPACE, edit(EC.BACKSPACE_WORD))
    kb.add_binding(KM.ALT, KeyCode.of_char("m"), edit(EC.BACKSPACE_WORD))
    # Alt: cutting
    kb.add_binding(KM.ALT, KeyCode.of_char("d"), edit(EC.CUT_WORD_RIGHT))
    # Alt: case changes
    kb.add_binding(KM.ALT, KeyCode.of_char("u"), edit(EC.UPPERCASE_WORD))
    kb.add_binding(KM.ALT, KeyCode.of_char("l"), edit(EC.LOWERCASE_WORD))
    kb.add_binding(KM.ALT, KeyCode.of_char("c"), edit(EC.CAPITALIZE_CHAR))

    return kb


class Emacs(EditMode):
    """Parses input events like an emacs-style editor."""

    def __init__(self, keybindings: Keybindings | None = None) -> None:
        self.keybindings = keybindings if keybindings is not None else default_emacs_keybindings()

    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        inner = event.into_event()
        if isinstance(inner, KeyEvent):
            return self._parse_key(inner.modifiers, inner.code)
        if isinstance(inner, MouseEvent):
            return ReedlineEvent(ReedlineEventKind.MOUSE)
        if isinstance(inner, ResizeEvent):
            return ReedlineEvent(ReedlineEventKind.RESIZE, inner.width, inner.height)
        if isinstance(inner, (FocusGained, FocusLost)):
            return ReedlineEvent(ReedlineEventKind.NONE)
        if isinstance(inner, PasteEvent):
            return edit_bind(EditCommand(EditCommandKind.INSERT_STRING, _normalise_paste(inner.text)))
        raise TypeError(f"unsupported event {inner!r}")

    def _parse_key(self, modifier: KeyModifiers, code: KeyCode) -> ReedlineEvent:
        if not code.is_char:
            found = self.keybindings.find_binding(modifier, code)
            return found if found is not None else ReedlineEvent(ReedlineEventKind.NONE)

        # Mixed modifiers (e.g. Ctrl+Alt for AltGr) are used by non-US keyboards to type characters.
        c = code.char if modifier == KeyModifiers.NONE else _ascii_lower(code.char)
        found = self.keybindings.find_binding(modifier, KeyCode.of_char(c))
        if found is not None:
            return found
        if modifier in _TYPING_MODIFIERS:
            typed = _ascii_upper(c) if modifier == KeyModifiers.SHIFT else c
            return edit_bind(EditCommand(EditCommandKind.INSERT_CHAR, typed))
        return ReedlineEvent(ReedlineEventKind.NONE)

    def edit_mode(self) -> PromptEditMode:
        return PromptEditMode.EMACS