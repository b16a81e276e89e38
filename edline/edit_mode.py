"""The edit-mode interface and cursor-shape configuration."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass

from edline.enums import ReedlineEvent
from edline.events import ReedlineRawEvent


class PromptEditMode(enum.Enum):
    """The edit mode a prompt indicator reflects."""

    DEFAULT = "Default"
    EMACS = "Emacs"
    VI_NORMAL = "ViNormal"
    VI_INSERT = "ViInsert"


class EditMode(abc.ABC):
    """Translates terminal input into editor events; Emacs and Vi implement it."""

    @abc.abstractmethod
    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        """Translate a user input event into what the line editor understands."""

    @abc.abstractmethod
    def edit_mode(self) -> PromptEditMode:
        """What to display in the prompt indicator."""


class CursorStyle(enum.Enum):
    """Terminal cursor shapes, valued by their DECSCUSR parameter."""

    DEFAULT_USER_SHAPE = 0
    BLINKING_BLOCK = 1
    STEADY_BLOCK = 2
    BLINKING_UNDERSCORE = 3
    STEADY_UNDERSCORE = 4
    BLINKING_BAR = 5
    STEADY_BAR = 6

    @property
    def escape_sequence(self) -> str:
        """The control sequence that selects this cursor shape."""
        return f"\x1b[{self.value} q"


@dataclass
class CursorConfig:
    """Cursor shape per edit mode; None leaves the cursor unchanged in that mode."""

    vi_insert: CursorStyle | None = None
    vi_normal: CursorStyle | None = None
    emacs: CursorStyle | None = None