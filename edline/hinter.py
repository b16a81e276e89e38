"""The hinter interface and token helpers for completing hints word by word."""

from __future__ import annotations

import abc
import unicodedata
from typing import Any

_NEWLINES = frozenset("\n\r\x0b\x0c\x85\u2028\u2029")
_MID_LETTER = frozenset(":\u00b7\u0387\u05f4\u2027\ufe13\ufe55\uff1a")
_MID_NUM_LET = frozenset(".'\u2018\u2019\u2024\ufe52\uff07\uff0e")
_MID_NUM = frozenset(",;\u037e\u0589\u060c\u060d\u066c\u07f8\u2044\ufe10\ufe14\ufe50\ufe54\uff0c\uff1b")


def _is_whitespace(c: str) -> bool:
    # Unicode White_Space: str.isspace also accepts the separator controls 0x1c-0x1f.
    return c.isspace() and c not in "\x1c\x1d\x1e\x1f"


def is_whitespace_str(s: str) -> bool:
    """Whether every character of ``s`` is whitespace (true for the empty string)."""
    return all(_is_whitespace(c) for c in s)


def _is_extend(c: str) -> bool:
    return unicodedata.category(c) in ("Mn", "Me", "Mc", "Cf")


def _is_katakana(c: str) -> bool:
    o = ord(c)
    return 0x30A0 <= o <= 0x30FF or 0x31F0 <= o <= 0x31FF or 0xFF66 <= o <= 0xFF9F


def _is_ideographic(c: str) -> bool:
    o = ord(c)
    return (
        0x3040 <= o <= 0x309F
        or 0x3400 <= o <= 0x4DBF
        or 0x4E00 <= o <= 0x9FFF
        or 0xF900 <= o <= 0xFAFF
        or 0x20000 <= o <= 0x3FFFF
    )


def _word_class(c: str) -> str | None:
    if unicodedata.category(c) == "Pc":
        return "connector"
    if c.isdecimal():
        return "number"
    if _is_katakana(c):
        return "katakana"
    if c.isalpha() and not _is_ideographic(c):
        return "letter"
    return None


def _joins(prev: str, nxt: str | None) -> bool:
    if nxt is None:
        return False
    if prev == nxt == "katakana":
        return True
    if nxt == "connector" or prev == "connector":
        return True
    return prev in ("letter", "number") and nxt in ("letter", "number")


def _segment_end(s: str, i: int) -> int:
    """End of the word-boundary segment that starts at ``i``."""
    n = len(s)

    def skip_extend(j: int) -> int:
        while j < n and _is_extend(s[j]):
            j += 1
        return j

    c = s[i]
    if c == "\r" and i + 1 < n and s[i + 1] == "\n":
        return i + 2
    if c in _NEWLINES:
        return i + 1
    cls = _word_class(c)
    if cls is None and unicodedata.category(c) == "Zs":
        j = i + 1
        while j < n and unicodedata.category(s[j]) == "Zs":
            j += 1
        return skip_extend(j)
    j = skip_extend(i + 1)
    if cls is None:
        return j

    while j < n:
        nxt = _word_class(s[j])
        if _joins(cls, nxt):
            cls = nxt
            j = skip_extend(j + 1)
            continue
        mid = s[j]
        k = skip_extend(j + 1)
        if k < n:
            after = _word_class(s[k])
            if cls == "letter" and after == "letter" and (mid in _MID_LETTER or mid in _MID_NUM_LET):
                j = skip_extend(k + 1)
                continue
            if cls == "number" and after == "number" and (mid in _MID_NUM or mid in _MID_NUM_LET):
                j = skip_extend(k + 1)
                continue
        break
    return j


def get_first_token(string: str) -> str:
    """Leading whitespace of ``string`` followed by its first word-boundary segment."""
    parts: list[str] = []
    i = 0
    while i < len(string):
        end = _segment_end(string, i)
        segment = string[i:end]
        parts.append(segment)
        i = end
        if not is_whitespace_str(segment):
            break
    return "".join(parts)


class Hinter(abc.ABC):
    """Produces an in-line hint for the current line, which the user may accept or ignore."""

    @abc.abstractmethod
    def handle(self, line: str, pos: int, history: Any, use_ansi_coloring: bool) -> str:
        """Compute the hint for ``line`` at ``pos`` and return it formatted for display."""

    @abc.abstractmethod
    def complete_hint(self) -> str:
        """The current hint, unformatted, for accepting it whole."""

    def next_hint_token(self) -> str:
        """The first token of the current hint, for accepting it word by word."""
        return get_first_token(self.complete_hint())