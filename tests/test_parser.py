from collections import deque
from dataclasses import dataclass
from typing import Optional

import pytest

from edline.enums import EditCommand, EditCommandKind, ReedlineEvent, ReedlineEventKind
from edline.vi.command import Command, CommandKind
from edline.vi.motion import Motion, MotionKind, ParseResult, ViCharSearch
from edline.vi.parser import ParsedViSequence, parse

E = ReedlineEventKind
EC = EditCommandKind


@dataclass
class _ViState:
    previous: Optional[ReedlineEvent] = None
    last_char_search: Optional[ViCharSearch] = None


def ev(kind, *args):
    return ReedlineEvent(kind, *args)


def edit(kind, *args):
    return ReedlineEvent(E.EDIT, [EditCommand(kind, *args)])


def multiple(*events):
    return ReedlineEvent(E.MULTIPLE, events)


def until_found(*kinds):
    return ReedlineEvent(E.UNTIL_FOUND, [ReedlineEvent(k) for k in kinds])


UP = until_found(E.MENU_UP, E.UP)
RIGHT = until_found(E.HISTORY_HINT_COMPLETE, E.MENU_RIGHT, E.RIGHT)


def test_delete_word():
    output = parse(["d", "w"])
    assert output == ParsedViSequence(
        None, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.NEXT_WORD))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_delete_word():
    output = parse(["2", "d", "w"])
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.NEXT_WORD))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_delete_two_word():
    output = parse(["2", "d", "2", "w"])
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), 2, ParseResult.valid(Motion(MotionKind.NEXT_WORD))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_delete_twenty_word():
    output = parse(["2", "d", "2", "0", "w"])
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), 20, ParseResult.valid(Motion(MotionKind.NEXT_WORD))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_delete_two_lines():
    output = parse(["2", "d", "d"])
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.LINE))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_find_action():
    output = parse(["d", "t", "d"])
    assert output == ParsedViSequence(
        None,
        Command(CommandKind.DELETE),
        None,
        ParseResult.valid(Motion(MotionKind.RIGHT_BEFORE, "d")),
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_has_garbage():
    output = parse(["2", "d", "m"])
    assert output == ParsedViSequence(2, Command(CommandKind.DELETE), None, ParseResult.INVALID)
    assert output.is_valid() is False


def test_partial_action():
    output = parse(["r"])
    assert output == ParsedViSequence(None, Command(CommandKind.INCOMPLETE), None, ParseResult.INCOMPLETE)
    assert output.is_valid() is True
    assert output.is_complete() is False


def test_partial_motion():
    output = parse(["f"])
    assert output == ParsedViSequence(None, None, None, ParseResult.INCOMPLETE)
    assert output.is_valid() is True
    assert output.is_complete() is False


def test_two_char_action_replace():
    output = parse(["r", "k"])
    assert output == ParsedViSequence(
        None, Command(CommandKind.REPLACE_CHAR, "k"), None, ParseResult.INCOMPLETE
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_find_motion():
    output = parse(["2", "f", "f"])
    assert output == ParsedViSequence(
        2, None, None, ParseResult.valid(Motion(MotionKind.RIGHT_UNTIL, "f"))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_up():
    output = parse(["2", "k"])
    assert output == ParsedViSequence(2, None, None, ParseResult.valid(Motion(MotionKind.UP)))
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_delete_waits_for_motion():
    output = parse(["d"])
    assert output.is_valid() is True
    assert output.is_complete() is False


@pytest.mark.parametrize(
    "keys, expected",
    [
        ("2k", multiple(UP, UP)),
        ("k", multiple(UP)),
        ("w", multiple(edit(EC.MOVE_WORD_RIGHT_START))),
        ("W", multiple(edit(EC.MOVE_BIG_WORD_RIGHT_START))),
        ("2l", multiple(RIGHT, RIGHT)),
        ("l", multiple(RIGHT)),
        ("0", multiple(edit(EC.MOVE_TO_LINE_START))),
        ("$", multiple(edit(EC.MOVE_TO_LINE_END))),
        ("i", multiple(ev(E.REPAINT))),
        ("p", multiple(edit(EC.PASTE_CUT_BUFFER_AFTER))),
        ("2p", multiple(edit(EC.PASTE_CUT_BUFFER_AFTER), edit(EC.PASTE_CUT_BUFFER_AFTER))),
        ("u", multiple(edit(EC.UNDO))),
        ("2u", multiple(edit(EC.UNDO), edit(EC.UNDO))),
        ("dd", multiple(edit(EC.CUT_CURRENT_LINE))),
        ("dw", multiple(edit(EC.CUT_WORD_RIGHT_TO_NEXT))),
        ("dW", multiple(edit(EC.CUT_BIG_WORD_RIGHT_TO_NEXT))),
        ("de", multiple(edit(EC.CUT_WORD_RIGHT))),
        ("db", multiple(edit(EC.CUT_WORD_LEFT))),
        ("dB", multiple(edit(EC.CUT_BIG_WORD_LEFT))),
    ],
)
def test_reedline_move(keys, expected):
    vi = _ViState()
    assert parse(list(keys)).to_reedline_event(vi) == expected


def test_change_line_appends_repaint():
    vi = _ViState()
    result = parse("cc").to_reedline_event(vi)
    assert result == multiple(edit(EC.MOVE_TO_START), edit(EC.CLEAR_TO_LINE_END), ev(E.REPAINT))


def test_command_is_remembered_for_repeat():
    vi = _ViState()
    first = parse("dw").to_reedline_event(vi)
    assert vi.previous == first
    repeated = parse(".").to_reedline_event(vi)
    assert repeated == multiple(first)


def test_repeat_without_previous_is_none():
    vi = _ViState()
    assert parse(".").to_reedline_event(vi) == ev(E.NONE)
    assert vi.previous is None


def test_plain_motion_is_not_remembered():
    vi = _ViState()
    parse("w").to_reedline_event(vi)
    assert vi.previous is None


def test_unsupported_motion_for_delete_gives_none():
    vi = _ViState()
    assert parse("dj").to_reedline_event(vi) == ev(E.NONE)
    assert vi.previous is None


def test_char_search_is_replayed_and_reversed():
    vi = _ViState()
    assert parse("fx").to_reedline_event(vi) == multiple(edit(EC.MOVE_RIGHT_UNTIL, "x"))
    assert vi.last_char_search == ViCharSearch(ViCharSearch.Kind.TO_RIGHT, "x")
    assert parse(";").to_reedline_event(vi) == multiple(edit(EC.MOVE_RIGHT_UNTIL, "x"))
    assert parse(",").to_reedline_event(vi) == multiple(edit(EC.MOVE_LEFT_UNTIL, "x"))


def test_incomplete_sequence_gives_none():
    vi = _ViState()
    assert parse("d").to_reedline_event(vi) == ev(E.NONE)


@pytest.mark.parametrize(
    "keys, expected",
    [("i", True), ("a", True), ("A", True), ("I", True), ("S", True), ("s", True),
     ("C", True), ("?", True), ("cw", True), ("dw", False), ("x", False), ("w", False)],
)
def test_enters_insert_mode(keys, expected):
    assert parse(keys).enters_insert_mode() is expected


def test_parse_consumes_deque():
    stream = deque("dwx")
    parse(stream)
    assert list(stream) == ["x"]


def test_leading_zero_is_a_motion():
    output = parse("0")
    assert output.multiplier is None
    assert output.motion == ParseResult.valid(Motion(MotionKind.START))