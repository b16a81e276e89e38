# edline

Building blocks for an interactive line editor: a model of edit commands and
editor events, emacs and vi style key parsing with configurable keybindings,
simple syntax highlighters, a hint helper and a bounded queue for messages
shown while a line is being edited.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `edline.enums`: `EditCommand` (built from an `EditCommandKind` and its
  arguments, with `edit_type()` returning an `EditType`), `ReedlineEvent`
  (built from a `ReedlineEventKind`), `Signal`, `UndoBehavior` with
  `create_undo_point_after()`, and `EventStatus`. Arguments are checked when a
  command or event is built; a wrong type raises `TypeError`, a wrong value
  `ValueError`.
- `edline.events`: raw terminal input (`KeyEvent`, `KeyCode`, `KeyModifiers`,
  `KeyEventKind`, `MouseEvent`, `ResizeEvent`, `FocusGained`, `FocusLost`,
  `PasteEvent`) and `ReedlineRawEvent.convert_from()`, which returns `None` for
  a key release and turns a key repeat into a press.
- `edline.keybindings`: `Keybindings`, a map from a modifier and key code to an
  event (`add_binding`, `find_binding`, `remove_binding`, `get_keybindings`),
  plus `edit_bind()` and the common control, navigation and edit binding sets.
  Binding an empty `UntilFound` event raises `ValueError`.
- `edline.edit_mode`: the `EditMode` interface, `PromptEditMode`,
  `CursorStyle` and `CursorConfig`.
- `edline.emacs`: the `Emacs` edit mode and `default_emacs_keybindings()`.
- `edline.vi.mode`: the `Vi` edit mode (starting in insert mode),
  `default_vi_normal_keybindings()` and `default_vi_insert_keybindings()`.
- `edline.vi.parser`: `parse()`, which splits a normal-mode key sequence into a
  `ParsedViSequence` of multiplier, command, count and motion.
- `edline.vi.command` and `edline.vi.motion`: vi commands, motions,
  character searches (`ViCharSearch`) and the `ParseResult` and
  `ReedlineOption` types used by the parser.
- `edline.highlighter`: `Color`, `Style` (with `paint()` producing ANSI escape
  sequences), the `Highlighter` interface, `ExampleHighlighter` and
  `SimpleMatchHighlighter`. A highlight is a list of `(Style, str)` pairs.
- `edline.hinter`: the `Hinter` interface, `get_first_token()` and
  `is_whitespace_str()`.
- `edline.external_printer`: `ExternalPrinter`, a bounded queue of lines with
  a blocking `print()` and a non-blocking `get_line()`.

## Example

```python
from edline.emacs import Emacs
from edline.events import KeyCode, KeyEvent, KeyModifiers, ReedlineRawEvent

emacs = Emacs()
raw = ReedlineRawEvent.convert_from(KeyEvent(KeyCode.of_char("l"), KeyModifiers.CONTROL))
print(emacs.parse_event(raw))  # ClearScreen
```

The vi parser handles multi-key sequences such as `2dw`:

```python
from edline.vi.mode import Vi
from edline.vi.parser import parse

vi = Vi()
sequence = parse("2dw")
print(sequence.is_complete())  # True
event = sequence.to_reedline_event(vi)
print(repr(event))  # a Multiple event holding two CutWordRightToNext edits
```

## What the package does not do

- It does not read from the terminal or draw anything. Input events are built
  by the caller and passed to an edit mode, which returns the `ReedlineEvent`
  describing what should happen.
- There is no line buffer that carries out `EditCommand`s, no undo stack, no
  history storage, no completion menus and no prompt. The commands and events
  only describe edits.
- `Hinter` is an interface only; no hinter that draws on history is included.
- `CursorStyle` provides the escape sequence for a cursor shape, but nothing in
  the package writes it to a terminal.