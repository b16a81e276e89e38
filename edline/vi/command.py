"""Vi normal-mode commands and how they translate into editor events."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any

from edline.enums import EditCommand, EditCommandKind, ReedlineEvent, ReedlineEventKind
from edline.vi.motion import Motion, MotionKind, ReedlineOption


class CommandKind(enum.Enum):
    """Every vi command the parser recognises."""

    INCOMPLETE = "Incomplete"
    DELETE = "Delete"
    DELETE_CHAR = "DeleteChar"
    REPLACE_CHAR = "ReplaceChar"
    SUBSTITUTE_CHAR_WITH_INSERT = "SubstituteCharWithInsert"
    PASTE_AFTER = "PasteAfter"
    PASTE_BEFORE = "PasteBefore"
    ENTER_VI_APPEND = "EnterViAppend"
    ENTER_VI_INSERT = "EnterViInsert"
    UNDO = "Undo"
    CHANGE_TO_LINE_END = "ChangeToLineEnd"
    DELETE_TO_END = "DeleteToEnd"
    APPEND_TO_END = "AppendToEnd"
    PREPEND_TO_START = "PrependToStart"
    REWRITE_CURRENT_LINE = "RewriteCurrentLine"
    CHANGE = "Change"
    HISTORY_SEARCH = "HistorySearch"
    SWITCHCASE = "Switchcase"
    REPEAT_LAST_ACTION = "RepeatLastAction"


_CK = CommandKind
_EC = EditCommandKind
_E = ReedlineEventKind

_COMMAND_CHARS = {
    "d": _CK.DELETE,
    "p": _CK.PASTE_AFTER,
    "P": _CK.PASTE_BEFORE,
    "i": _CK.ENTER_VI_INSERT,
    "a": _CK.ENTER_VI_APPEND,
    "u": _CK.UNDO,
    "c": _CK.CHANGE,
    "x": _CK.DELETE_CHAR,
    "s": _CK.SUBSTITUTE_CHAR_WITH_INSERT,
    "?": _CK.HISTORY_SEARCH,
    "C": _CK.CHANGE_TO_LINE_END,
    "D": _CK.DELETE_TO_END,
    "I": _CK.PREPEND_TO_START,
    "A": _CK.APPEND_TO_END,
    "S": _CK.REWRITE_CURRENT_LINE,
    "~": _CK.SWITCHCASE,
    ".": _CK.REPEAT_LAST_ACTION,
}

_COMMAND_EDITS = {
    _CK.ENTER_VI_APPEND: _EC.MOVE_RIGHT,
    _CK.PASTE_AFTER: _EC.PASTE_CUT_BUFFER_AFTER,
    _CK.PASTE_BEFORE: _EC.PASTE_CUT_BUFFER_BEFORE,
    _CK.UNDO: _EC.UNDO,
    _CK.CHANGE_TO_LINE_END: _EC.CLEAR_TO_LINE_END,
    _CK.DELETE_TO_END: _EC.CUT_TO_LINE_END,
    _CK.APPEND_TO_END: _EC.MOVE_TO_LINE_END,
    _CK.PREPEND_TO_START: _EC.MOVE_TO_LINE_START,
    _CK.REWRITE_CURRENT_LINE: _EC.CUT_CURRENT_LINE,
    _CK.DELETE_CHAR: _EC.CUT_CHAR,
    _CK.SUBSTITUTE_CHAR_WITH_INSERT: _EC.CUT_CHAR,
    _CK.SWITCHCASE: _EC.SWITCHCASE_CHAR,
}

_COMMAND_EVENTS = {
    _CK.ENTER_VI_INSERT: _E.REPAINT,
    _CK.HISTORY_SEARCH: _E.SEARCH_HISTORY,
}

_MK = MotionKind

# Edits shared by delete and change for a given motion.
_MOTION_CUTS = {
    _MK.NEXT_WORD: (_EC.CUT_WORD_RIGHT_TO_NEXT,),
    _MK.NEXT_BIG_WORD: (_EC.CUT_BIG_WORD_RIGHT_TO_NEXT,),
    _MK.NEXT_WORD_END: (_EC.CUT_WORD_RIGHT,),
    _MK.NEXT_BIG_WORD_END: (_EC.CUT_BIG_WORD_RIGHT,),
    _MK.PREVIOUS_WORD: (_EC.CUT_WORD_LEFT,),
    _MK.PREVIOUS_BIG_WORD: (_EC.CUT_BIG_WORD_LEFT,),
    _MK.START: (_EC.CUT_FROM_LINE_START,),
    _MK.LEFT: (_EC.BACKSPACE,),
    _MK.RIGHT: (_EC.DELETE,),
}

_DELETE_CUTS = {
    **_MOTION_CUTS,
    _MK.END: (_EC.CUT_TO_LINE_END,),
    _MK.LINE: (_EC.CUT_CURRENT_LINE,),
}

_CHANGE_CUTS = {
    **_MOTION_CUTS,
    _MK.END: (_EC.CLEAR_TO_LINE_END,),
    _MK.LINE: (_EC.MOVE_TO_START, _EC.CLEAR_TO_LINE_END),
}


def _edit(kind: EditCommandKind, *args: Any) -> ReedlineOption:
    return ReedlineOption.of_edit(EditCommand(kind, *args))


@dataclass(frozen=True)
class Command:
    """A parsed vi command, with the replacement character for ``r``."""

    kind: CommandKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind is CommandKind.REPLACE_CHAR:
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise ValueError("ReplaceChar needs a single replacement character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} carries no character")

    def whole_line_char(self) -> str | None:
        """The character that, repeated after this command, selects the whole line."""
        if self.kind is CommandKind.DELETE:
            return "d"
        if self.kind is CommandKind.CHANGE:
            return "c"
        return None

    def requires_motion(self) -> bool:
        """Whether the command only completes once a motion follows."""
        return self.kind in (CommandKind.DELETE, CommandKind.CHANGE)

    def to_reedline(self, vi_state: Any) -> list[ReedlineOption]:
        """The options for this command used without a motion."""
        kind = self.kind
        if kind in _COMMAND_EDITS:
            return [_edit(_COMMAND_EDITS[kind])]
        if kind in _COMMAND_EVENTS:
            return [ReedlineOption.of_event(ReedlineEvent(_COMMAND_EVENTS[kind]))]
        if kind is CommandKind.REPLACE_CHAR:
            return [_edit(EditCommandKind.REPLACE_CHAR, self.char)]
        if kind is CommandKind.REPEAT_LAST_ACTION:
            previous = vi_state.previous
            return [ReedlineOption.of_event(previous)] if previous is not None else []
        # Delete, change and an unfinished command wait for more input.
        return [ReedlineOption.INCOMPLETE]

    def to_reedline_with_motion(self, motion: Motion, vi_state: Any) -> list[ReedlineOption] | None:
        """The options for this command applied over ``motion``; None when they do not combine."""
        if self.kind is CommandKind.DELETE:
            return self._cut_over(motion, vi_state, _DELETE_CUTS)
        if self.kind is CommandKind.CHANGE:
            ops = self._cut_over(motion, vi_state, _CHANGE_CUTS)
            if ops is None:
                return None
            # Repaint so the switch into insert mode is displayed.
            return [*ops, ReedlineOption.of_event(ReedlineEvent(ReedlineEventKind.REPAINT))]
        return None

    @staticmethod
    def _cut_over(
        motion: Motion, vi_state: Any, table: dict[MotionKind, tuple[EditCommandKind, ...]]
    ) -> list[ReedlineOption] | None:
        kind = motion.kind
        if kind in table:
            return [_edit(edit) for edit in table[kind]]
        search = motion.char_search
        if search is not None:
            vi_state.last_char_search = search
            return [ReedlineOption.of_edit(search.to_cut())]
        if kind is MotionKind.REPLAY_CHAR_SEARCH:
            last = vi_state.last_char_search
            return [ReedlineOption.of_edit(last.to_cut())] if last is not None else None
        if kind is MotionKind.REVERSE_CHAR_SEARCH:
            last = vi_state.last_char_search
            return [ReedlineOption.of_edit(last.reverse().to_cut())] if last is not None else None
        return None


def parse_command(stream: deque[str]) -> Command | None:
    """Parse a command from the left of ``stream``; None (consuming nothing) if there is none."""
    if not stream:
        return None
    c = stream[0]
    if c == "r":
        stream.popleft()
        if stream:
            return Command(CommandKind.REPLACE_CHAR, stream.popleft())
        return Command(CommandKind.INCOMPLETE)
    kind = _COMMAND_CHARS.get(c)
    if kind is None:
        return None
    stream.popleft()
    return Command(kind)