"""Parsing of vi normal-mode key sequences into editor events."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain, repeat
from typing import Any

from edline.enums import ReedlineEvent, ReedlineEventKind
from edline.vi.command import Command, CommandKind, parse_command
from edline.vi.motion import ParseResult, ReedlineOption, parse_motion

_DIGITS = "0123456789"

_INSERTING_COMMANDS = frozenset(
    {
        CommandKind.ENTER_VI_INSERT,
        CommandKind.ENTER_VI_APPEND,
        CommandKind.CHANGE_TO_LINE_END,
        CommandKind.APPEND_TO_END,
        CommandKind.PREPEND_TO_START,
        CommandKind.REWRITE_CURRENT_LINE,
        CommandKind.SUBSTITUTE_CHAR_WITH_INSERT,
        CommandKind.HISTORY_SEARCH,
    }
)


def _none_event() -> ReedlineEvent:
    return ReedlineEvent(ReedlineEventKind.NONE)


@dataclass(frozen=True)
class ParsedViSequence:
    """A vi key sequence split into multiplier, command, count and motion."""

    multiplier: int | None
    command: Command | None
    count: int | None
    motion: ParseResult

    def is_valid(self) -> bool:
        """Whether the sequence can still become a meaningful action."""
        return not self.motion.is_invalid()

    def is_complete(self) -> bool:
        """Whether the sequence is finished and can be turned into an event."""
        command, motion = self.command, self.motion
        if command is None:
            return motion.is_valid
        if command.kind is CommandKind.INCOMPLETE:
            return False
        if motion.is_valid:
            return True
        if motion.is_incomplete:
            return not command.requires_motion()
        return False

    def _total_multiplier(self) -> int:
        # Vim only considers the product of the multiplier and the count.
        multiplier = 1 if self.multiplier is None else self.multiplier
        count = 1 if self.count is None else self.count
        return multiplier * count

    def _apply_multiplier(self, raw_events: list[ReedlineOption] | None) -> ReedlineEvent:
        if raw_events is None:
            return _none_event()
        options = chain.from_iterable(repeat(raw_events, self._total_multiplier()))
        events = [event for event in (o.into_reedline_event() for o in options) if event is not None]
        if not events or _none_event() in events:
            return _none_event()
        return ReedlineEvent(ReedlineEventKind.MULTIPLE, events)

    def enters_insert_mode(self) -> bool:
        """Whether performing the sequence switches the editor into insert mode."""
        if self.command is None:
            return False
        if self.motion.is_incomplete:
            return self.command.kind in _INSERTING_COMMANDS
        return self.command.kind is CommandKind.CHANGE and self.motion.is_valid

    def to_reedline_event(self, vi_state: Any) -> ReedlineEvent:
        """The editor event for the sequence; commands are remembered on ``vi_state`` for repeating."""
        command, motion = self.command, self.motion
        if command is not None and self.count is None and motion.is_incomplete:
            return self._remember(vi_state, self._apply_multiplier(command.to_reedline(vi_state)))
        if command is not None and motion.is_valid:
            options = command.to_reedline_with_motion(motion.value, vi_state)
            return self._remember(vi_state, self._apply_multiplier(options))
        if command is None and motion.is_valid:
            return self._apply_multiplier(motion.value.to_reedline(vi_state))
        return _none_event()

    @staticmethod
    def _remember(vi_state: Any, event: ReedlineEvent) -> ReedlineEvent:
        if event.kind is not ReedlineEventKind.NONE:
            vi_state.previous = event
        return event


def _parse_number(stream: deque[str]) -> int | None:
    if not stream or stream[0] == "0" or stream[0] not in _DIGITS:
        return None
    count = 0
    while stream and stream[0] in _DIGITS:
        count = count * 10 + int(stream.popleft())
    return count


def parse(stream: Iterable[str]) -> ParsedViSequence:
    """Parse a vi key sequence; a deque passed in is consumed from the left."""
    chars = stream if isinstance(stream, deque) else deque(stream)
    multiplier = _parse_number(chars)
    command = parse_command(chars)
    count = _parse_number(chars)
    motion = parse_motion(chars, command.whole_line_char() if command is not None else None)
    return ParsedViSequence(multiplier, command, count, motion)