"""Data models for stylex-fold."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def indent_width(text: str) -> int:
    """Return the column of the first character that is not a space or tab.

    Every space or tab counts as one column, matching the column an editor
    reports for the line. Other whitespace (NBSP, form feed) is content.
    A line of only spaces and tabs reports its length.

    Examples:
        indent_width("    color: 'red',")  # 4
        indent_width("\\tcolor: 'red',")  # 1
    """
    return len(text) - len(text.lstrip(" \t"))


@dataclass(frozen=True)
class Document:
    """Read-only snapshot of a source document addressed by zero-based line index.

    Attributes:
        lines: Line texts without line terminators.

    Examples:
        Document.from_text("const styles = stylex.create({\\n});\\n")
    """

    lines: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> Document:
        """Split on `\\n`, `\\r\\n` and `\\r` only, as editors number lines."""
        lines = LINE_BREAK_PATTERN.split(text)
        # A trailing line break does not open another line
        if lines[-1] == "":
            lines.pop()
        return cls(tuple(lines))

    @classmethod
    def from_lines(cls, lines) -> Document:
        """Build from lines that may still carry one trailing line break each."""
        return cls(tuple(line.removesuffix("\n").removesuffix("\r") for line in lines))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> str:
        return self.lines[index]

    def indent_of(self, index: int) -> int:
        """Return the indentation column of a line, see `indent_width`."""
        return indent_width(self.lines[index])


class LineKind(Enum):
    """Classification of a single line.

    Attributes:
        BLANK: Only whitespace.
        BLOCK_MARKER: Contains a block-opening marker token.
        KEY_DEFINITION: Opens a foldable nested object (``key: {``).
        BLOCK_TERMINATOR: A closing token such as ``});`` or ``}``.
        OTHER: Anything else, including single-line entries.
    """

    BLANK = auto()
    BLOCK_MARKER = auto()
    KEY_DEFINITION = auto()
    BLOCK_TERMINATOR = auto()
    OTHER = auto()


class ScanState(Enum):
    """Locator states while walking a document.

    Attributes:
        OUTSIDE: Not inside any style block.
        INSIDE_BLOCK: Between a marker line and its terminator.
    """

    OUTSIDE = auto()
    INSIDE_BLOCK = auto()


@dataclass(frozen=True)
class Candidate:
    """Key definition buffered until its block closes."""

    line: int
    indent: int


@dataclass
class ScanContext:
    """Encapsulate locator state while walking a document.

    Attributes:
        state: Current scan state.
        block_start_line: Zero-based line of the open block's marker, if any.
        block_start_indent: Indentation column of the open block's marker.
        candidates: Key definitions collected inside the open block.
    """

    state: ScanState = ScanState.OUTSIDE
    block_start_line: int | None = None
    block_start_indent: int = 0
    candidates: list[Candidate] = field(default_factory=list)


@dataclass(frozen=True)
class BlockRegion:
    """A style block and its top-level keys.

    Attributes:
        start: Zero-based line of the marker.
        end: Zero-based line that closed the block (exclusive bound); the next
            marker's line or the line count when the block was closed implicitly.
        indent: Indentation column of the marker line.
        key_lines: Top-level key lines in document order.
    """

    start: int
    end: int
    indent: int
    key_lines: tuple[int, ...] = ()


class FoldIntent(Enum):
    """User-facing folding commands."""

    FOLD_NAMES = "fold-names"
    FOLD_BLOCKS = "fold-blocks"
    UNFOLD_NAMES = "unfold-names"
    UNFOLD_ALL = "unfold-all"


class FoldAction(Enum):
    FOLD = "fold"
    UNFOLD = "unfold"


@dataclass(frozen=True)
class FoldRequest:
    """Line set and depth to hand to a region actuator.

    Attributes:
        intent: Command that produced the request.
        action: Whether the regions are folded or unfolded.
        depth: Number of nested levels affected.
        lines: Zero-based header lines, ascending.
    """

    intent: FoldIntent
    action: FoldAction
    depth: int
    lines: tuple[int, ...]
