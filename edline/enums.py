"""Signals, edit commands, undo behaviours and editor events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class EditType(enum.Enum):
    """Coarse grouping of edit commands, used to decide undo behaviour."""

    MOVE_CURSOR = "MoveCursor"
    UNDO_REDO = "UndoRedo"
    EDIT_TEXT = "EditText"


_MOVE = EditType.MOVE_CURSOR
_EDIT = EditType.EDIT_TEXT
_UNDO = EditType.UNDO_REDO

_U16_MAX = 0xFFFF


def _is_whitespace(c: str) -> bool:
    # Unicode White_Space: str.isspace also accepts the separator controls 0x1c-0x1f.
    return c.isspace() and c not in "\x1c\x1d\x1e\x1f"


def _check_arg(label: str, kind: str, value: Any) -> Any:
    if kind == "char":
        if not isinstance(value, str):
            raise TypeError(f"{label} expects a character, got {type(value).__name__}")
        if len(value) != 1:
            raise ValueError(f"{label} expects a single character, got {value!r}")
        return value
    if kind in ("uint", "u16"):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{label} expects an integer, got {type(value).__name__}")
        if value < 0 or (kind == "u16" and value > _U16_MAX):
            raise ValueError(f"{label} got an out-of-range integer: {value}")
        return value
    if kind == "str":
        if not isinstance(value, str):
            raise TypeError(f"{label} expects a string, got {type(value).__name__}")
        return value
    if kind == "edits":
        items = tuple(value)
        if not all(isinstance(item, EditCommand) for item in items):
            raise TypeError(f"{label} expects a sequence of EditCommand")
        return items
    if kind == "events":
        items = tuple(value)
        if not all(isinstance(item, ReedlineEvent) for item in items):
            raise TypeError(f"{label} expects a sequence of ReedlineEvent")
        return items
    raise ValueError(f"unknown argument kind {kind!r}")


def _check_args(label: str, signature: tuple[str, ...], args: tuple[Any, ...]) -> tuple[Any, ...]:
    if len(args) != len(signature):
        raise TypeError(f"{label} takes {len(signature)} argument(s), got {len(args)}")
    return tuple(_check_arg(label, kind, value) for kind, value in zip(signature, args))


class SignalKind(enum.Enum):
    """Ways a line read can end."""

    SUCCESS = "Success"
    CTRL_C = "CtrlC"
    CTRL_D = "CtrlD"


@dataclass(frozen=True)
class Signal:
    """Result of reading a line: the entered text, or an abort."""

    kind: SignalKind
    content: str | None = None

    def __post_init__(self) -> None:
        if self.kind is SignalKind.SUCCESS:
            if not isinstance(self.content, str):
                raise TypeError("a successful signal carries the entered text")
        elif self.content is not None:
            raise ValueError(f"{self.kind.value} carries no content")


class EditCommandKind(enum.Enum):
    """Every editing action, with its arguments, edit type and description."""

    def __init__(self, label: str, signature: tuple[str, ...], edit_type: EditType, display: str | None):
        self.label = label
        self.signature = signature
        self.edit_type = edit_type
        self.display = display or label

    MOVE_TO_START = ("MoveToStart", (), _MOVE, None)
    MOVE_TO_LINE_START = ("MoveToLineStart", (), _MOVE, None)
    MOVE_TO_END = ("MoveToEnd", (), _MOVE, None)
    MOVE_TO_LINE_END = ("MoveToLineEnd", (), _MOVE, None)
    MOVE_LEFT = ("MoveLeft", (), _MOVE, None)
    MOVE_RIGHT = ("MoveRight", (), _MOVE, None)
    MOVE_WORD_LEFT = ("MoveWordLeft", (), _MOVE, None)
    MOVE_BIG_WORD_LEFT = ("MoveBigWordLeft", (), _MOVE, None)
    MOVE_WORD_RIGHT = ("MoveWordRight", (), _MOVE, None)
    MOVE_WORD_RIGHT_START = ("MoveWordRightStart", (), _MOVE, None)
    MOVE_BIG_WORD_RIGHT_START = ("MoveBigWordRightStart", (), _MOVE, None)
    MOVE_WORD_RIGHT_END = ("MoveWordRightEnd", (), _MOVE, None)
    MOVE_BIG_WORD_RIGHT_END = ("MoveBigWordRightEnd", (), _MOVE, None)
    MOVE_TO_POSITION = ("MoveToPosition", ("uint",), _MOVE, "MoveToPosition  Value: <int>")
    INSERT_CHAR = ("InsertChar", ("char",), _EDIT, "InsertChar  Value: <char>")
    INSERT_STRING = ("InsertString", ("str",), _EDIT, "InsertString Value: <string>")
    INSERT_NEWLINE = ("InsertNewline", (), _EDIT, None)
    REPLACE_CHAR = ("ReplaceChar", ("char",), _EDIT, "ReplaceChar <char>")
    REPLACE_CHARS = ("ReplaceChars", ("uint", "str"), _EDIT, "ReplaceChars <int> <string>")
    BACKSPACE = ("Backspace", (), _EDIT, None)
    DELETE = ("Delete", (), _EDIT, None)
    CUT_CHAR = ("CutChar", (), _EDIT, None)
    BACKSPACE_WORD = ("BackspaceWord", (), _EDIT, None)
    DELETE_WORD = ("DeleteWord", (), _EDIT, None)
    CLEAR = ("Clear", (), _EDIT, None)
    CLEAR_TO_LINE_END = ("ClearToLineEnd", (), _EDIT, None)
    COMPLETE = ("Complete", (), _EDIT, None)
    CUT_CURRENT_LINE = ("CutCurrentLine", (), _EDIT, None)
    CUT_FROM_START = ("CutFromStart", (), _EDIT, None)
    CUT_FROM_LINE_START = ("CutFromLineStart", (), _EDIT, None)
    CUT_TO_END = ("CutToEnd", (), _EDIT, None)
    CUT_TO_LINE_END = ("CutToLineEnd", (), _EDIT, None)
    CUT_WORD_LEFT = ("CutWordLeft", (), _EDIT, None)
    CUT_BIG_WORD_LEFT = ("CutBigWordLeft", (), _EDIT, None)
    CUT_WORD_RIGHT = ("CutWordRight", (), _EDIT, None)
    CUT_BIG_WORD_RIGHT = ("CutBigWordRight", (), _EDIT, None)
    CUT_WORD_RIGHT_TO_NEXT = ("CutWordRightToNext", (), _EDIT, None)
    CUT_BIG_WORD_RIGHT_TO_NEXT = ("CutBigWordRightToNext", (), _EDIT, None)
    PASTE_CUT_BUFFER_BEFORE = ("PasteCutBufferBefore", (), _EDIT, None)
    PASTE_CUT_BUFFER_AFTER = ("PasteCutBufferAfter", (), _EDIT, None)
    UPPERCASE_WORD = ("UppercaseWord", (), _EDIT, None)
    LOWERCASE_WORD = ("LowercaseWord", (), _EDIT, None)
    CAPITALIZE_CHAR = ("CapitalizeChar", (), _EDIT, None)
    SWITCHCASE_CHAR = ("SwitchcaseChar", (), _EDIT, None)
    SWAP_WORDS = ("SwapWords", (), _EDIT, None)
    SWAP_GRAPHEMES = ("SwapGraphemes", (), _EDIT, None)
    UNDO = ("Undo", (), _UNDO, None)
    REDO = ("Redo", (), _UNDO, None)
    CUT_RIGHT_UNTIL = ("CutRightUntil", ("char",), _EDIT, "CutRightUntil Value: <char>")
    CUT_RIGHT_BEFORE = ("CutRightBefore", ("char",), _EDIT, "CutRightBefore Value: <char>")
    MOVE_RIGHT_UNTIL = ("MoveRightUntil", ("char",), _MOVE, "MoveRightUntil Value: <char>")
    MOVE_RIGHT_BEFORE = ("MoveRightBefore", ("char",), _MOVE, "MoveRightBefore Value: <char>")
    CUT_LEFT_UNTIL = ("CutLeftUntil", ("char",), _EDIT, "CutLeftUntil Value: <char>")
    CUT_LEFT_BEFORE = ("CutLeftBefore", ("char",), _EDIT, "CutLeftBefore Value: <char>")
    MOVE_LEFT_UNTIL = ("MoveLeftUntil", ("char",), _MOVE, "MoveLeftUntil Value: <char>")
    MOVE_LEFT_BEFORE = ("MoveLeftBefore", ("char",), _MOVE, "MoveLeftBefore Value: <char>")


@dataclass(frozen=True, init=False)
class EditCommand:
    """An editing action together with its arguments."""

    kind: EditCommandKind
    args: tuple[Any, ...]

    def __init__(self, kind: EditCommandKind, *args: Any) -> None:
        if not isinstance(kind, EditCommandKind):
            raise TypeError(f"expected an EditCommandKind, got {type(kind).__name__}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "args", _check_args(kind.label, kind.signature, args))

    @property
    def value(self) -> Any:
        """The first argument, or None for commands without arguments."""
        return self.args[0] if self.args else None

    def edit_type(self) -> EditType:
        """Whether the command moves the cursor, edits text, or undoes/redoes."""
        return self.kind.edit_type

    def __str__(self) -> str:
        return self.kind.display

    def __repr__(self) -> str:
        inner = ", ".join(repr(a) for a in self.args)
        return f"EditCommand.{self.kind.label}({inner})" if self.args else f"EditCommand.{self.kind.label}"


class UndoBehaviorKind(enum.Enum):
    """How a buffer change relates to the undo stack."""

    INSERT_CHARACTER = "InsertCharacter"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    MOVE_CURSOR = "MoveCursor"
    HISTORY_NAVIGATION = "HistoryNavigation"
    CREATE_UNDO_POINT = "CreateUndoPoint"
    UNDO_REDO = "UndoRedo"


_CHAR_KINDS = (UndoBehaviorKind.INSERT_CHARACTER, UndoBehaviorKind.BACKSPACE, UndoBehaviorKind.DELETE)


@dataclass(frozen=True)
class UndoBehavior:
    """Tag carried by every buffer change, optionally with the character involved."""

    kind: UndoBehaviorKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind is UndoBehaviorKind.INSERT_CHARACTER and self.char is None:
            raise TypeError("InsertCharacter requires the inserted character")
        if self.char is not None:
            if self.kind not in _CHAR_KINDS:
                raise ValueError(f"{self.kind.value} carries no character")
            _check_arg(self.kind.value, "char", self.char)

    def create_undo_point_after(self, previous: UndoBehavior) -> bool:
        """Whether this change starts a new undo set after ``previous``."""
        kind, prev_kind = self.kind, previous.kind
        if kind is UndoBehaviorKind.MOVE_CURSOR:
            return False
        if kind is prev_kind is UndoBehaviorKind.HISTORY_NAVIGATION:
            return False
        if kind is prev_kind is UndoBehaviorKind.INSERT_CHARACTER:
            prev, new = previous.char, self.char
            return prev in ("\n", "\r") or (not _is_whitespace(prev) and _is_whitespace(new))
        if kind is prev_kind and kind in (UndoBehaviorKind.BACKSPACE, UndoBehaviorKind.DELETE):
            prev, new = previous.char, self.char
            if prev is None or new is None:
                return False
            return new in ("\n", "\r") or (_is_whitespace(prev) and not _is_whitespace(new))
        return True


class ReedlineEventKind(enum.Enum):
    """Every action the line editor engine understands."""

    def __init__(self, label: str, signature: tuple[str, ...], display: str | None):
        self.label = label
        self.signature = signature
        self.display = display or label

    NONE = ("None", (), None)
    HISTORY_HINT_COMPLETE = ("HistoryHintComplete", (), None)
    HISTORY_HINT_WORD_COMPLETE = ("HistoryHintWordComplete", (), None)
    CTRL_D = ("CtrlD", (), None)
    CTRL_C = ("CtrlC", (), None)
    CLEAR_SCREEN = ("ClearScreen", (), None)
    CLEAR_SCROLLBACK = ("ClearScrollback", (), None)
    ENTER = ("Enter", (), None)
    SUBMIT = ("Submit", (), None)
    SUBMIT_OR_NEWLINE = ("SubmitOrNewline", (), None)
    ESC = ("Esc", (), None)
    MOUSE = ("Mouse", (), None)
    RESIZE = ("Resize", ("u16", "u16"), "Resize <int> <int>")
    EDIT = ("Edit", ("edits",), "Edit: <EditCommand> or Edit: <EditCommand> value: <string>")
    REPAINT = ("Repaint", (), None)
    PREVIOUS_HISTORY = ("PreviousHistory", (), None)
    UP = ("Up", (), None)
    DOWN = ("Down", (), None)
    RIGHT = ("Right", (), None)
    LEFT = ("Left", (), None)
    NEXT_HISTORY = ("NextHistory", (), None)
    SEARCH_HISTORY = ("SearchHistory", (), None)
    MULTIPLE = ("Multiple", ("events",), "Multiple[ { ReedLineEvents, } ]")
    UNTIL_FOUND = ("UntilFound", ("events",), "UntilFound [ { ReedLineEvents, } ]")
    MENU = ("Menu", ("str",), "Menu Name: <string>")
    MENU_NEXT = ("MenuNext", (), None)
    MENU_PREVIOUS = ("MenuPrevious", (), None)
    MENU_UP = ("MenuUp", (), None)
    MENU_DOWN = ("MenuDown", (), None)
    MENU_LEFT = ("MenuLeft", (), None)
    MENU_RIGHT = ("MenuRight", (), None)
    MENU_PAGE_NEXT = ("MenuPageNext", (), None)
    MENU_PAGE_PREVIOUS = ("MenuPagePrevious", (), None)
    EXECUTE_HOST_COMMAND = ("ExecuteHostCommand", ("str",), None)
    OPEN_EDITOR = ("OpenEditor", (), None)


@dataclass(frozen=True, init=False)
class ReedlineEvent:
    """An engine action together with its arguments; sequences are kept as tuples."""

    kind: ReedlineEventKind
    args: tuple[Any, ...]

    def __init__(self, kind: ReedlineEventKind, *args: Any) -> None:
        if not isinstance(kind, ReedlineEventKind):
            raise TypeError(f"expected a ReedlineEventKind, got {type(kind).__name__}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "args", _check_args(kind.label, kind.signature, args))

    @property
    def value(self) -> Any:
        """The first argument, or None for events without arguments."""
        return self.args[0] if self.args else None

    def __str__(self) -> str:
        return self.kind.display

    def __repr__(self) -> str:
        inner = ", ".join(repr(a) for a in self.args)
        return f"ReedlineEvent.{self.kind.label}({inner})" if self.args else f"ReedlineEvent.{self.kind.label}"


class EventStatusKind(enum.Enum):
    """Outcome of handling one engine event."""

    HANDLED = "Handled"
    INAPPLICABLE = "Inapplicable"
    EXITS = "Exits"


@dataclass(frozen=True)
class EventStatus:
    """Outcome of handling an event; an exit carries the signal to return."""

    kind: EventStatusKind
    signal: Signal | None = None

    def __post_init__(self) -> None:
        if self.kind is EventStatusKind.EXITS:
            if not isinstance(self.signal, Signal):
                raise TypeError("an exiting status carries a Signal")
        elif self.signal is not None:
            raise ValueError(f"{self.kind.value} carries no signal")