"""Key-to-event bindings and the binding sets shared by the edit modes."""

from __future__ import annotations

from dataclasses import dataclass

from edline.enums import EditCommand, EditCommandKind, ReedlineEvent, ReedlineEventKind
from edline.events import KeyCode, KeyModifiers


@dataclass(frozen=True)
class KeyCombination:
    """A key together with the exact set of modifiers held with it."""

    modifier: KeyModifiers
    key_code: KeyCode


class Keybindings:
    """Mapping from key combinations to the events they trigger."""

    def __init__(self) -> None:
        self.bindings: dict[KeyCombination, ReedlineEvent] = {}

    @classmethod
    def empty(cls) -> Keybindings:
        """A keybinding set with no bindings."""
        return cls()

    def add_binding(self, modifier: KeyModifiers, key_code: KeyCode, command: ReedlineEvent) -> None:
        """Bind ``command`` to the key, replacing any earlier binding.

        Raises ValueError for an UntilFound event with no alternatives.
        """
        if command.kind is ReedlineEventKind.UNTIL_FOUND and not command.value:
            raise ValueError("UntilFound should contain a series of potential events to handle")
        self.bindings[KeyCombination(modifier, key_code)] = command

    def find_binding(self, modifier: KeyModifiers, key_code: KeyCode) -> ReedlineEvent | None:
        """The event bound to the key, or None."""
        return self.bindings.get(KeyCombination(modifier, key_code))

    def remove_binding(self, modifier: KeyModifiers, key_code: KeyCode) -> ReedlineEvent | None:
        """Remove the key's binding and return the event it was bound to, if any."""
        return self.bindings.pop(KeyCombination(modifier, key_code), None)

    def get_keybindings(self) -> dict[KeyCombination, ReedlineEvent]:
        """All bindings."""
        return self.bindings

    def __len__(self) -> int:
        return len(self.bindings)

    def __repr__(self) -> str:
        return f"Keybindings({len(self.bindings)} bindings)"


def edit_bind(command: EditCommand) -> ReedlineEvent:
    """An event that runs the single edit ``command``."""
    return ReedlineEvent(ReedlineEventKind.EDIT, [command])


def _edit(kind: EditCommandKind) -> ReedlineEvent:
    return edit_bind(EditCommand(kind))


def _until_found(*events: ReedlineEvent) -> ReedlineEvent:
    return ReedlineEvent(ReedlineEventKind.UNTIL_FOUND, events)


def _event(kind: ReedlineEventKind) -> ReedlineEvent:
    return ReedlineEvent(kind)


def add_common_control_bindings(kb: Keybindings) -> None:
    """Esc, Ctrl-C, Ctrl-D, Ctrl-L, Ctrl-R and Ctrl-O (open the external editor)."""
    E = ReedlineEventKind
    KM = KeyModifiers
    kb.add_binding(KM.NONE, KeyCode.ESC, _event(E.ESC))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("c"), _event(E.CTRL_C))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("d"), _event(E.CTRL_D))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("l"), _event(E.CLEAR_SCREEN))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("r"), _event(E.SEARCH_HISTORY))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("o"), _event(E.OPEN_EDITOR))


def add_common_navigation_bindings(kb: Keybindings) -> None:
    """Arrow keys, their Ctrl variants, Home/End and the emacs-style arrows."""
    E = ReedlineEventKind
    EC = EditCommandKind
    KM = KeyModifiers

    up = _until_found(_event(E.MENU_UP), _event(E.UP))
    down = _until_found(_event(E.MENU_DOWN), _event(E.DOWN))
    kb.add_binding(KM.NONE, KeyCode.UP, up)
    kb.add_binding(KM.NONE, KeyCode.DOWN, down)
    kb.add_binding(KM.NONE, KeyCode.LEFT, _until_found(_event(E.MENU_LEFT), _event(E.LEFT)))
    kb.add_binding(
        KM.NONE,
        KeyCode.RIGHT,
        _until_found(_event(E.HISTORY_HINT_COMPLETE), _event(E.MENU_RIGHT), _event(E.RIGHT)),
    )

    kb.add_binding(KM.CONTROL, KeyCode.LEFT, _edit(EC.MOVE_WORD_LEFT))
    kb.add_binding(
        KM.CONTROL,
        KeyCode.RIGHT,
        _until_found(_event(E.HISTORY_HINT_WORD_COMPLETE), _edit(EC.MOVE_WORD_RIGHT)),
    )

    kb.add_binding(KM.NONE, KeyCode.HOME, _edit(EC.MOVE_TO_LINE_START))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("a"), _edit(EC.MOVE_TO_LINE_START))
    line_end = _until_found(_event(E.HISTORY_HINT_COMPLETE), _edit(EC.MOVE_TO_LINE_END))
    kb.add_binding(KM.NONE, KeyCode.END, line_end)
    kb.add_binding(KM.CONTROL, KeyCode.of_char("e"), line_end)

    kb.add_binding(KM.CONTROL, KeyCode.HOME, _edit(EC.MOVE_TO_START))
    kb.add_binding(KM.CONTROL, KeyCode.END, _edit(EC.MOVE_TO_END))

    kb.add_binding(KM.CONTROL, KeyCode.of_char("p"), up)
    kb.add_binding(KM.CONTROL, KeyCode.of_char("n"), down)


def add_common_edit_bindings(kb: Keybindings) -> None:
    """Delete, Backspace and their word-deleting variants."""
    EC = EditCommandKind
    KM = KeyModifiers
    kb.add_binding(KM.NONE, KeyCode.BACKSPACE, _edit(EC.BACKSPACE))
    kb.add_binding(KM.NONE, KeyCode.DELETE, _edit(EC.DELETE))
    kb.add_binding(KM.CONTROL, KeyCode.BACKSPACE, _edit(EC.BACKSPACE_WORD))
    kb.add_binding(KM.CONTROL, KeyCode.DELETE, _edit(EC.DELETE_WORD))
    # Base commands should not affect the cut buffer
    kb.add_binding(KM.CONTROL, KeyCode.of_char("h"), _edit(EC.BACKSPACE))
    kb.add_binding(KM.CONTROL, KeyCode.of_char("w"), _edit(EC.BACKSPACE_WORD))