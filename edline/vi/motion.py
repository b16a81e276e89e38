"""Vi motions, character searches and the option/result types shared by the vi parser."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any, ClassVar

from edline.enums import EditCommand, EditCommandKind, ReedlineEvent, ReedlineEventKind


@dataclass(frozen=True)
class ReedlineOption:
    """One step of a parsed vi sequence: an event, a single edit, or a marker that more input is needed."""

    event: ReedlineEvent | None = None
    edit: EditCommand | None = None

    INCOMPLETE: ClassVar[ReedlineOption]

    def __post_init__(self) -> None:
        if self.event is not None and self.edit is not None:
            raise ValueError("an option holds either an event or an edit, not both")

    @classmethod
    def of_event(cls, event: ReedlineEvent) -> ReedlineOption:
        return cls(event=event)

    @classmethod
    def of_edit(cls, edit: EditCommand) -> ReedlineOption:
        return cls(edit=edit)

    @property
    def is_incomplete(self) -> bool:
        return self.event is None and self.edit is None

    def into_reedline_event(self) -> ReedlineEvent | None:
        """The engine event for this option; None when it is incomplete."""
        if self.event is not None:
            return self.event
        if self.edit is not None:
            return ReedlineEvent(ReedlineEventKind.EDIT, [self.edit])
        return None


ReedlineOption.INCOMPLETE = ReedlineOption()


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing part of a vi sequence: a value, or incomplete, or invalid input."""

    class State(enum.Enum):
        VALID = "Valid"
        INCOMPLETE = "Incomplete"
        INVALID = "Invalid"

    state: ParseResult.State
    value: Any = None

    INCOMPLETE: ClassVar[ParseResult]
    INVALID: ClassVar[ParseResult]

    def __post_init__(self) -> None:
        if self.state is not ParseResult.State.VALID and self.value is not None:
            raise ValueError(f"{self.state.value} carries no value")

    @classmethod
    def valid(cls, value: Any) -> ParseResult:
        return cls(ParseResult.State.VALID, value)

    @property
    def is_valid(self) -> bool:
        return self.state is ParseResult.State.VALID

    @property
    def is_incomplete(self) -> bool:
        return self.state is ParseResult.State.INCOMPLETE

    def is_invalid(self) -> bool:
        """Whether the input could not be parsed at all."""
        return self.state is ParseResult.State.INVALID


ParseResult.INCOMPLETE = ParseResult(ParseResult.State.INCOMPLETE)
ParseResult.INVALID = ParseResult(ParseResult.State.INVALID)


@dataclass(frozen=True)
class ViCharSearch:
    """A remembered f, F, t or T motion, replayed by ';' and reversed by ','."""

    class Kind(enum.Enum):
        TO_RIGHT = "f"
        TO_LEFT = "F"
        TILL_RIGHT = "t"
        TILL_LEFT = "T"

    kind: ViCharSearch.Kind
    char: str

    def reverse(self) -> ViCharSearch:
        """The same search in the opposite direction."""
        return ViCharSearch(_REVERSED[self.kind], self.char)

    def to_move(self) -> EditCommand:
        """The cursor movement performing this search."""
        return EditCommand(_MOVES[self.kind], self.char)

    def to_cut(self) -> EditCommand:
        """The cut performing this search."""
        return EditCommand(_CUTS[self.kind], self.char)


_CS = ViCharSearch.Kind
_REVERSED = {
    _CS.TO_RIGHT: _CS.TO_LEFT,
    _CS.TO_LEFT: _CS.TO_RIGHT,
    _CS.TILL_RIGHT: _CS.TILL_LEFT,
    _CS.TILL_LEFT: _CS.TILL_RIGHT,
}
_MOVES = {
    _CS.TO_RIGHT: EditCommandKind.MOVE_RIGHT_UNTIL,
    _CS.TO_LEFT: EditCommandKind.MOVE_LEFT_UNTIL,
    _CS.TILL_RIGHT: EditCommandKind.MOVE_RIGHT_BEFORE,
    _CS.TILL_LEFT: EditCommandKind.MOVE_LEFT_BEFORE,
}
_CUTS = {
    _CS.TO_RIGHT: EditCommandKind.CUT_RIGHT_UNTIL,
    _CS.TO_LEFT: EditCommandKind.CUT_LEFT_UNTIL,
    _CS.TILL_RIGHT: EditCommandKind.CUT_RIGHT_BEFORE,
    _CS.TILL_LEFT: EditCommandKind.CUT_LEFT_BEFORE,
}


class MotionKind(enum.Enum):
    """Every vi motion; character searches carry the search they record."""

    def __init__(self, label: str, search: ViCharSearch.Kind | None) -> None:
        self.label = label
        self.search = search

    @property
    def takes_char(self) -> bool:
        return self.search is not None

    LEFT = ("Left", None)
    RIGHT = ("Right", None)
    UP = ("Up", None)
    DOWN = ("Down", None)
    NEXT_WORD = ("NextWord", None)
    NEXT_BIG_WORD = ("NextBigWord", None)
    NEXT_WORD_END = ("NextWordEnd", None)
    NEXT_BIG_WORD_END = ("NextBigWordEnd", None)
    PREVIOUS_WORD = ("PreviousWord", None)
    PREVIOUS_BIG_WORD = ("PreviousBigWord", None)
    LINE = ("Line", None)
    START = ("Start", None)
    END = ("End", None)
    RIGHT_UNTIL = ("RightUntil", _CS.TO_RIGHT)
    RIGHT_BEFORE = ("RightBefore", _CS.TILL_RIGHT)
    LEFT_UNTIL = ("LeftUntil", _CS.TO_LEFT)
    LEFT_BEFORE = ("LeftBefore", _CS.TILL_LEFT)
    REPLAY_CHAR_SEARCH = ("ReplayCharSearch", None)
    REVERSE_CHAR_SEARCH = ("ReverseCharSearch", None)


def _event(kind: ReedlineEventKind) -> ReedlineEvent:
    return ReedlineEvent(kind)


def _until_found(*kinds: ReedlineEventKind) -> ReedlineOption:
    return ReedlineOption.of_event(ReedlineEvent(ReedlineEventKind.UNTIL_FOUND, [_event(k) for k in kinds]))


def _edit(kind: EditCommandKind) -> ReedlineOption:
    return ReedlineOption.of_edit(EditCommand(kind))


_E = ReedlineEventKind
_EC = EditCommandKind
_MK = MotionKind

_MOTION_EDITS = {
    _MK.NEXT_WORD: _EC.MOVE_WORD_RIGHT_START,
    _MK.NEXT_BIG_WORD: _EC.MOVE_BIG_WORD_RIGHT_START,
    _MK.NEXT_WORD_END: _EC.MOVE_WORD_RIGHT_END,
    _MK.NEXT_BIG_WORD_END: _EC.MOVE_BIG_WORD_RIGHT_END,
    _MK.PREVIOUS_WORD: _EC.MOVE_WORD_LEFT,
    _MK.PREVIOUS_BIG_WORD: _EC.MOVE_BIG_WORD_LEFT,
    _MK.START: _EC.MOVE_TO_LINE_START,
    _MK.END: _EC.MOVE_TO_LINE_END,
}

_MOTION_EVENTS = {
    _MK.LEFT: (_E.MENU_LEFT, _E.LEFT),
    _MK.RIGHT: (_E.HISTORY_HINT_COMPLETE, _E.MENU_RIGHT, _E.RIGHT),
    _MK.UP: (_E.MENU_UP, _E.UP),
    _MK.DOWN: (_E.MENU_DOWN, _E.DOWN),
}


@dataclass(frozen=True)
class Motion:
    """A parsed vi motion, with the target character for f, t, F and T."""

    kind: MotionKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind.takes_char:
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise ValueError(f"{self.kind.label} needs a single target character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.label} carries no character")

    @property
    def char_search(self) -> ViCharSearch | None:
        """The character search this motion performs, if it is one."""
        if self.kind.search is None:
            return None
        return ViCharSearch(self.kind.search, self.char)

    def to_reedline(self, vi_state: Any) -> list[ReedlineOption]:
        """The options performing this motion on its own; records character searches on ``vi_state``."""
        kind = self.kind
        if kind in _MOTION_EVENTS:
            return [_until_found(*_MOTION_EVENTS[kind])]
        if kind in _MOTION_EDITS:
            return [_edit(_MOTION_EDITS[kind])]
        search = self.char_search
        if search is not None:
            vi_state.last_char_search = search
            return [ReedlineOption.of_edit(search.to_move())]
        if kind is MotionKind.REPLAY_CHAR_SEARCH:
            last = vi_state.last_char_search
            return [ReedlineOption.of_edit(last.to_move())] if last is not None else []
        if kind is MotionKind.REVERSE_CHAR_SEARCH:
            last = vi_state.last_char_search
            return [ReedlineOption.of_edit(last.reverse().to_move())] if last is not None else []
        # A whole-line motion only makes sense after a command.
        return []


_SIMPLE_MOTIONS = {
    "h": _MK.LEFT,
    "l": _MK.RIGHT,
    "j": _MK.DOWN,
    "k": _MK.UP,
    "b": _MK.PREVIOUS_WORD,
    "B": _MK.PREVIOUS_BIG_WORD,
    "w": _MK.NEXT_WORD,
    "W": _MK.NEXT_BIG_WORD,
    "e": _MK.NEXT_WORD_END,
    "E": _MK.NEXT_BIG_WORD_END,
    "0": _MK.START,
    "^": _MK.START,
    "$": _MK.END,
    ";": _MK.REPLAY_CHAR_SEARCH,
    ",": _MK.REVERSE_CHAR_SEARCH,
}

_SEARCH_MOTIONS = {
    "f": _MK.RIGHT_UNTIL,
    "t": _MK.RIGHT_BEFORE,
    "F": _MK.LEFT_UNTIL,
    "T": _MK.LEFT_BEFORE,
}


def parse_motion(stream: deque[str], command_char: str | None) -> ParseResult:
    """Parse a motion from the left of ``stream``, consuming what it recognises.

    ``command_char`` is the character that, repeated, makes a whole-line motion (as in ``dd``).
    """
    if not stream:
        return ParseResult.INCOMPLETE
    c = stream[0]
    kind = _SIMPLE_MOTIONS.get(c)
    if kind is not None:
        stream.popleft()
        return ParseResult.valid(Motion(kind))
    kind = _SEARCH_MOTIONS.get(c)
    if kind is not None:
        stream.popleft()
        if not stream:
            return ParseResult.INCOMPLETE
        return ParseResult.valid(Motion(kind, stream.popleft()))
    if command_char is not None and c == command_char:
        stream.popleft()
        return ParseResult.valid(Motion(MotionKind.LINE))
    return ParseResult.INVALID