from collections import deque
from types import SimpleNamespace

import pytest

from edline.enums import EditCommand, EditCommandKind, ReedlineEvent, ReedlineEventKind
from edline.vi.command import Command, CommandKind, parse_command
from edline.vi.motion import Motion, MotionKind, ReedlineOption, ViCharSearch


def _state(previous=None):
    return SimpleNamespace(last_char_search=None, previous=previous)


def _edit(kind, *args):
    return ReedlineOption.of_edit(EditCommand(kind, *args))


REPAINT = ReedlineOption.of_event(ReedlineEvent(ReedlineEventKind.REPAINT))


@pytest.mark.parametrize(
    "char, kind",
    [
        ("d", CommandKind.DELETE),
        ("p", CommandKind.PASTE_AFTER),
        ("P", CommandKind.PASTE_BEFORE),
        ("i", CommandKind.ENTER_VI_INSERT),
        ("a", CommandKind.ENTER_VI_APPEND),
        ("u", CommandKind.UNDO),
        ("c", CommandKind.CHANGE),
        ("x", CommandKind.DELETE_CHAR),
        ("s", CommandKind.SUBSTITUTE_CHAR_WITH_INSERT),
        ("?", CommandKind.HISTORY_SEARCH),
        ("C", CommandKind.CHANGE_TO_LINE_END),
        ("D", CommandKind.DELETE_TO_END),
        ("I", CommandKind.PREPEND_TO_START),
        ("A", CommandKind.APPEND_TO_END),
        ("S", CommandKind.REWRITE_CURRENT_LINE),
        ("~", CommandKind.SWITCHCASE),
        (".", CommandKind.REPEAT_LAST_ACTION),
    ],
)
def test_parse_command_chars(char, kind):
    stream = deque(char + "w")
    assert parse_command(stream) == Command(kind)
    assert list(stream) == ["w"]


def test_replace_needs_character():
    assert parse_command(deque("r")) == Command(CommandKind.INCOMPLETE)
    stream = deque("rk")
    assert parse_command(stream) == Command(CommandKind.REPLACE_CHAR, "k")
    assert not stream


def test_unknown_char_is_not_a_command():
    stream = deque("w")
    assert parse_command(stream) is None
    assert list(stream) == ["w"]
    assert parse_command(deque()) is None


def test_replace_char_validation():
    with pytest.raises(ValueError):
        Command(CommandKind.REPLACE_CHAR)
    with pytest.raises(ValueError):
        Command(CommandKind.DELETE, "d")


def test_whole_line_char_and_requires_motion():
    assert Command(CommandKind.DELETE).whole_line_char() == "d"
    assert Command(CommandKind.CHANGE).whole_line_char() == "c"
    assert Command(CommandKind.UNDO).whole_line_char() is None
    assert Command(CommandKind.DELETE).requires_motion()
    assert Command(CommandKind.CHANGE).requires_motion()
    assert not Command(CommandKind.PASTE_AFTER).requires_motion()


@pytest.mark.parametrize(
    "kind, expected",
    [
        (CommandKind.ENTER_VI_APPEND, EditCommandKind.MOVE_RIGHT),
        (CommandKind.PASTE_AFTER, EditCommandKind.PASTE_CUT_BUFFER_AFTER),
        (CommandKind.PASTE_BEFORE, EditCommandKind.PASTE_CUT_BUFFER_BEFORE),
        (CommandKind.UNDO, EditCommandKind.UNDO),
        (CommandKind.CHANGE_TO_LINE_END, EditCommandKind.CLEAR_TO_LINE_END),
        (CommandKind.DELETE_TO_END, EditCommandKind.CUT_TO_LINE_END),
        (CommandKind.APPEND_TO_END, EditCommandKind.MOVE_TO_LINE_END),
        (CommandKind.PREPEND_TO_START, EditCommandKind.MOVE_TO_LINE_START),
        (CommandKind.REWRITE_CURRENT_LINE, EditCommandKind.CUT_CURRENT_LINE),
        (CommandKind.DELETE_CHAR, EditCommandKind.CUT_CHAR),
        (CommandKind.SUBSTITUTE_CHAR_WITH_INSERT, EditCommandKind.CUT_CHAR),
        (CommandKind.SWITCHCASE, EditCommandKind.SWITCHCASE_CHAR),
    ],
)
def test_simple_commands_to_reedline(kind, expected):
    assert Command(kind).to_reedline(_state()) == [_edit(expected)]


def test_event_commands_to_reedline():
    assert Command(CommandKind.ENTER_VI_INSERT).to_reedline(_state()) == [REPAINT]
    assert Command(CommandKind.HISTORY_SEARCH).to_reedline(_state()) == [
        ReedlineOption.of_event(ReedlineEvent(ReedlineEventKind.SEARCH_HISTORY))
    ]
    assert Command(CommandKind.REPLACE_CHAR, "k").to_reedline(_state()) == [
        _edit(EditCommandKind.REPLACE_CHAR, "k")
    ]


@pytest.mark.parametrize("kind", [CommandKind.DELETE, CommandKind.CHANGE, CommandKind.INCOMPLETE])
def test_motion_commands_alone_are_incomplete(kind):
    assert Command(kind).to_reedline(_state()) == [ReedlineOption.INCOMPLETE]


def test_repeat_last_action():
    previous = ReedlineEvent(ReedlineEventKind.EDIT, [EditCommand(EditCommandKind.UNDO)])
    assert Command(CommandKind.REPEAT_LAST_ACTION).to_reedline(_state(previous)) == [
        ReedlineOption.of_event(previous)
    ]
    assert Command(CommandKind.REPEAT_LAST_ACTION).to_reedline(_state()) == []


def test_delete_line_and_word():
    delete = Command(CommandKind.DELETE)
    assert delete.to_reedline_with_motion(Motion(MotionKind.LINE), _state()) == [
        _edit(EditCommandKind.CUT_CURRENT_LINE)
    ]
    assert delete.to_reedline_with_motion(Motion(MotionKind.NEXT_WORD), _state()) == [
        _edit(EditCommandKind.CUT_WORD_RIGHT_TO_NEXT)
    ]
    assert delete.to_reedline_with_motion(Motion(MotionKind.END), _state()) == [
        _edit(EditCommandKind.CUT_TO_LINE_END)
    ]


def test_change_line_appends_repaint():
    change = Command(CommandKind.CHANGE)
    assert change.to_reedline_with_motion(Motion(MotionKind.LINE), _state()) == [
        _edit(EditCommandKind.MOVE_TO_START),
        _edit(EditCommandKind.CLEAR_TO_LINE_END),
        REPAINT,
    ]
    assert change.to_reedline_with_motion(Motion(MotionKind.PREVIOUS_BIG_WORD), _state()) == [
        _edit(EditCommandKind.CUT_BIG_WORD_LEFT),
        REPAINT,
    ]


@pytest.mark.parametrize("kind", [CommandKind.DELETE, CommandKind.CHANGE])
@pytest.mark.parametrize("motion", [MotionKind.UP, MotionKind.DOWN])
def test_vertical_motions_do_not_combine(kind, motion):
    assert Command(kind).to_reedline_with_motion(Motion(motion), _state()) is None


def test_non_motion_command_ignores_motion():
    assert Command(CommandKind.UNDO).to_reedline_with_motion(Motion(MotionKind.NEXT_WORD), _state()) is None


def test_delete_with_char_search_records_it():
    state = _state()
    result = Command(CommandKind.DELETE).to_reedline_with_motion(Motion(MotionKind.LEFT_BEFORE, "x"), state)
    assert result == [_edit(EditCommandKind.CUT_LEFT_BEFORE, "x")]
    assert state.last_char_search == ViCharSearch(ViCharSearch.Kind.TILL_LEFT, "x")

    replay = Command(CommandKind.DELETE).to_reedline_with_motion(Motion(MotionKind.REPLAY_CHAR_SEARCH), state)
    assert replay == result
    reverse = Command(CommandKind.CHANGE).to_reedline_with_motion(Motion(MotionKind.REVERSE_CHAR_SEARCH), state)
    assert reverse == [_edit(EditCommandKind.CUT_RIGHT_BEFORE, "x"), REPAINT]


def test_replay_without_search_does_not_combine():
    delete = Command(CommandKind.DELETE)
    assert delete.to_reedline_with_motion(Motion(MotionKind.REPLAY_CHAR_SEARCH), _state()) is None
    change = Command(CommandKind.CHANGE)
    assert change.to_reedline_with_motion(Motion(MotionKind.REVERSE_CHAR_SEARCH), _state()) is None