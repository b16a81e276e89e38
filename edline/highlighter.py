"""Syntax highlighting of the edit buffer into styled text segments."""

from __future__ import annotations

import abc
import copy
import enum
from dataclasses import dataclass, replace


class Color(enum.Enum):
    """Terminal colours, valued by their ANSI foreground code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39
    DARK_GRAY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_PURPLE = 95
    LIGHT_CYAN = 96
    LIGHT_GRAY = 97

    @property
    def background_code(self) -> int:
        return self.value + 10


_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Style:
    """Text colours and attributes; builder methods return a new style."""

    foreground: Color | None = None
    background: Color | None = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    def fg(self, color: Color) -> Style:
        return replace(self, foreground=color)

    def on(self, color: Color) -> Style:
        return replace(self, background=color)

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def dimmed(self) -> Style:
        return replace(self, is_dimmed=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)

    def blink(self) -> Style:
        return replace(self, is_blink=True)

    def reverse(self) -> Style:
        return replace(self, is_reverse=True)

    def hidden(self) -> Style:
        return replace(self, is_hidden=True)

    def strikethrough(self) -> Style:
        return replace(self, is_strikethrough=True)

    @property
    def is_plain(self) -> bool:
        return self == Style()

    def _codes(self) -> list[str]:
        flags = (
            (self.is_bold, "1"),
            (self.is_dimmed, "2"),
            (self.is_italic, "3"),
            (self.is_underline, "4"),
            (self.is_blink, "5"),
            (self.is_reverse, "7"),
            (self.is_hidden, "8"),
            (self.is_strikethrough, "9"),
        )
        codes = [code for enabled, code in flags if enabled]
        if self.foreground is not None:
            codes.append(str(self.foreground.value))
        if self.background is not None:
            codes.append(str(self.background.background_code))
        return codes

    def paint(self, text: str) -> str:
        """``text`` wrapped in the escape sequences of this style; unchanged for a plain style."""
        if self.is_plain:
            return text
        return f"\x1b[{';'.join(self._codes())}m{text}{_RESET}"


StyledText = list[tuple[Style, str]]


class Highlighter(abc.ABC):
    """Turns the current line into styled segments that together spell out the line."""

    @abc.abstractmethod
    def highlight(self, line: str, cursor: int) -> StyledText:
        """Styled segments for ``line``; ``cursor`` is the insertion point."""


DEFAULT_BUFFER_MATCH_COLOR = Color.GREEN
DEFAULT_BUFFER_NEUTRAL_COLOR = Color.WHITE
DEFAULT_BUFFER_NOTMATCH_COLOR = Color.RED


def _byte_len(s: str) -> int:
    return len(s.encode("utf-8"))


class ExampleHighlighter(Highlighter):
    """Highlights the longest known command found in the line."""

    def __init__(self, external_commands: list[str] | None = None) -> None:
        self.external_commands = list(external_commands or [])
        self.match_color = DEFAULT_BUFFER_MATCH_COLOR
        self.notmatch_color = DEFAULT_BUFFER_NOTMATCH_COLOR
        self.neutral_color = DEFAULT_BUFFER_NEUTRAL_COLOR

    def change_colors(self, match_color: Color, notmatch_color: Color, neutral_color: Color) -> None:
        """Use different colours for matches, non-matching lines and neutral text."""
        self.match_color = match_color
        self.notmatch_color = notmatch_color
        self.neutral_color = neutral_color

    def highlight(self, line: str, cursor: int) -> StyledText:
        matches = [command for command in self.external_commands if command in line]
        if matches:
            longest = ""
            for item in matches:
                if _byte_len(item) > _byte_len(longest):
                    longest = item
            if longest:
                before, _, after = line.partition(longest)
            else:
                before, after = "", line
            return [
                (Style().fg(self.neutral_color), before),
                (Style().fg(self.match_color), longest),
                (Style().bold().fg(self.neutral_color), after),
            ]
        if not self.external_commands:
            return [(Style().fg(self.neutral_color), line)]
        return [(Style().fg(self.notmatch_color), line)]


class SimpleMatchHighlighter(Highlighter):
    """Highlights every exact, non-overlapping match of a query string."""

    def __init__(self, query: str = "") -> None:
        self.query = query
        self.neutral_style = Style()
        self.match_style = Style().fg(Color.GREEN)

    def _with(self, **changes: object) -> SimpleMatchHighlighter:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    def with_query(self, query: str) -> SimpleMatchHighlighter:
        """A copy matching ``query`` instead."""
        return self._with(query=query)

    def with_match_style(self, match_style: Style) -> SimpleMatchHighlighter:
        """A copy styling matches with ``match_style``."""
        return self._with(match_style=match_style)

    def with_neutral_style(self, neutral_style: Style) -> SimpleMatchHighlighter:
        """A copy styling non-matching text with ``neutral_style``."""
        return self._with(neutral_style=neutral_style)

    def highlight(self, line: str, cursor: int) -> StyledText:
        if not self.query:
            return [(self.neutral_style, line)]
        styled: StyledText = []
        next_idx = 0
        idx = line.find(self.query)
        while idx != -1:
            if idx != next_idx:
                styled.append((self.neutral_style, line[next_idx:idx]))
            styled.append((self.match_style, self.query))
            next_idx = idx + len(self.query)
            idx = line.find(self.query, next_idx)
        if next_idx != len(line):
            styled.append((self.neutral_style, line[next_idx:]))
        return styled