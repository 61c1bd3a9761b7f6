"""Block and top-level key locators."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .classifier import classify_line, is_block_marker
from .config import ConfigError, FoldConfig, validate_config
from .exceptions import LineTooLongError, LocateFileError, StylexFoldError
from .filesystem import safe_read
from .models import BlockRegion, Candidate, Document, LineKind, ScanContext, ScanState


def find_block_lines(document: Document, config: FoldConfig | None = None) -> list[int]:
    """Locate every line that opens a style block.

    Args:
        document: Snapshot to scan.
        config: Supplies the marker tokens. Defaults to a new `FoldConfig`.

    Returns:
        list[int]: Zero-based line indices in ascending order. Empty when the
            document has no markers.

    Examples:
        find_block_lines(Document.from_text("const s = stylex.create({\\n});"))  # [0]
    """
    config = config or FoldConfig()
    return [
        line_number
        for line_number, text in enumerate(document.lines)
        if is_block_marker(text, config)
    ]


def _select_top_level(candidates: list[Candidate]) -> tuple[int, ...]:
    """Keep the candidates sitting at the shallowest indentation.

    Examples:
        _select_top_level([Candidate(1, 2), Candidate(2, 4), Candidate(5, 2)])  # (1, 5)
    """
    if not candidates:
        return ()
    min_indent = min(candidate.indent for candidate in candidates)
    return tuple(candidate.line for candidate in candidates if candidate.indent == min_indent)


def _has_mixed_indentation(document: Document, candidates: list[Candidate]) -> bool:
    seen: set[str] = set()
    for candidate in candidates:
        text = document.line_at(candidate.line)
        seen.update(text[: candidate.indent])
    return " " in seen and "\t" in seen


def _enter_block(ctx: ScanContext, line_number: int, indent: int) -> None:
    ctx.state = ScanState.INSIDE_BLOCK
    ctx.block_start_line = line_number
    ctx.block_start_indent = indent
    ctx.candidates = []


def _close_block(
    ctx: ScanContext,
    end_line: int,
    document: Document,
    regions: list[BlockRegion],
    warn: Callable[[str], None] | None,
) -> None:
    """Flush the open block's candidates into a `BlockRegion` and reset state.

    Args:
        ctx: Scan context describing the open block.
        end_line: Line that closed the block, or the line count at end of document.
        document: Snapshot being scanned, used for diagnostics.
        regions: Output list receiving the closed region.
        warn: Optional callback for non-fatal diagnostics.
    """
    if ctx.state is not ScanState.INSIDE_BLOCK or ctx.block_start_line is None:
        return

    if warn is not None and _has_mixed_indentation(document, ctx.candidates):
        warn(
            f"Warning: block at line {ctx.block_start_line + 1} mixes tabs and spaces; "
            "top-level keys may be inaccurate"
        )

    regions.append(
        BlockRegion(
            start=ctx.block_start_line,
            end=end_line,
            indent=ctx.block_start_indent,
            key_lines=_select_top_level(ctx.candidates),
        )
    )

    ctx.state = ScanState.OUTSIDE
    ctx.block_start_line = None
    ctx.block_start_indent = 0
    ctx.candidates = []


def find_block_regions(
    document: Document,
    config: FoldConfig | None = None,
    warn: Callable[[str], None] | None = None,
) -> list[BlockRegion]:
    """Walk a document once and collect style blocks with their top-level keys.

    A block opens on a marker line and closes on the first non-blank line that
    is an explicit terminator token or sits at or left of the marker's column.
    A marker met while a block is open closes that block first. A block still
    open at the end of the document closes there. Within a block, foldable key
    definitions deeper than the marker are buffered; when the block closes,
    the ones at the shallowest buffered column become its top-level keys.

    Args:
        document: Snapshot to scan.
        config: Token and pattern configuration. Defaults to a new `FoldConfig`.
        warn: Optional callback for non-fatal diagnostics.

    Returns:
        list[BlockRegion]: Regions in document order; never overlapping.

    Examples:
        find_block_regions(Document.from_text(source))
    """
    config = config or FoldConfig()
    ctx = ScanContext()
    regions: list[BlockRegion] = []

    for line_number, text in enumerate(document.lines):
        kind = classify_line(text, config)

        if kind is LineKind.BLOCK_MARKER:
            _close_block(ctx, line_number, document, regions, warn)
            _enter_block(ctx, line_number, document.indent_of(line_number))
            continue

        if ctx.state is not ScanState.INSIDE_BLOCK:
            continue

        # Blank lines never count as a dedent
        if kind is LineKind.BLANK:
            continue

        indent = document.indent_of(line_number)
        if indent <= ctx.block_start_indent or kind is LineKind.BLOCK_TERMINATOR:
            _close_block(ctx, line_number, document, regions, warn)
            continue

        if kind is LineKind.KEY_DEFINITION:
            ctx.candidates.append(Candidate(line=line_number, indent=indent))

    _close_block(ctx, document.line_count, document, regions, warn)

    return regions


def find_key_lines(
    document: Document,
    config: FoldConfig | None = None,
    warn: Callable[[str], None] | None = None,
) -> list[int]:
    """Locate the top-level keys of every style block.

    Args:
        document: Snapshot to scan.
        config: Token and pattern configuration. Defaults to a new `FoldConfig`.
        warn: Optional callback for non-fatal diagnostics.

    Returns:
        list[int]: Zero-based key lines in document order. Single-line entries
            and keys nested inside another key's value are excluded.

    Examples:
        find_key_lines(Document.from_text(source))  # [1, 5]
    """
    return [
        line_number
        for region in find_block_regions(document, config, warn)
        for line_number in region.key_lines
    ]


def check_line_lengths(document: Document, max_line_length: int) -> None:
    """Raise `LineTooLongError` for the first line longer than the limit."""
    for line_number, text in enumerate(document.lines):
        if len(text) > max_line_length:
            raise LineTooLongError(line_number + 1, max_line_length)


def read_document(
    filepath: Path,
    config: FoldConfig | None = None,
    max_line_length: int | None = None,
) -> Document:
    """Read a source file into a `Document`.

    Args:
        filepath: Path to the file to read.
        config: Configuration supplying the default line-length limit.
        max_line_length: Optional override for the maximum line length
            (excluding line endings).

    Returns:
        Document: Snapshot of the file's lines.

    Raises:
        LocateFileError: If the configuration is invalid, the file cannot be
            read or decoded, or a line exceeds the length limit.

    Examples:
        document = read_document(Path("src/Button.tsx"))
    """
    config = config or FoldConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise LocateFileError(str(error)) from error

    effective_max_line_length = (
        config.max_line_length if max_line_length is None else max_line_length
    )
    if effective_max_line_length <= 0:
        raise LocateFileError("`max_line_length` override must be a positive integer")

    try:
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise LocateFileError(error_message) from error
    except IOError as error:
        raise LocateFileError(str(error)) from error

    document = Document.from_text(content)

    try:
        check_line_lengths(document, effective_max_line_length)
    except LineTooLongError as error:
        error_message = (
            f"{filepath} contains a line at line {error.line_number} "
            f"exceeding the maximum allowed length of {error.max_line_length} characters."
        )
        raise LocateFileError(error_message) from error
    except StylexFoldError as error:
        raise LocateFileError(f"{filepath}: {error}") from error

    return document
