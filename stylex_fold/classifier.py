"""Line classification heuristics for StyleX source files."""

from __future__ import annotations

import re
from functools import lru_cache

from .config import FoldConfig
from .constants import SINGLE_LINE_CLOSER
from .models import LineKind


@lru_cache(maxsize=16)
def _compile_key_pattern(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def is_blank(text: str) -> bool:
    return text.strip() == ""


def is_block_marker(text: str, config: FoldConfig | None = None) -> bool:
    """Check whether a line opens a style block.

    Plain case-sensitive substring test against the untrimmed line, so a marker
    inside a string or comment also counts.

    Args:
        text: Raw line text.
        config: Supplies `marker_tokens`. Defaults to a new `FoldConfig`.

    Returns:
        bool: True when any marker token occurs in the line.

    Examples:
        is_block_marker("const styles = stylex.create({")  # True
        is_block_marker("const styles = StyleX.create({")  # False
    """
    config = config or FoldConfig()
    return any(token in text for token in config.marker_tokens)


def is_key_definition(text: str, config: FoldConfig | None = None) -> bool:
    """Check whether a line names a key that opens a nested object.

    The pattern is matched against the trimmed line and is anchored at the
    start only, so trailing content on the same line is allowed.

    Args:
        text: Raw line text.
        config: Supplies `key_pattern`. Defaults to a new `FoldConfig`.

    Returns:
        bool: True for lines shaped like ``key: {``, ``"0%": {`` or
            ``key: (props) => ({``.

    Examples:
        is_key_definition("  container: {")  # True
        is_key_definition("  dynamic: (color) => ({")  # True
        is_key_definition("  color: 'red',")  # False
    """
    config = config or FoldConfig()
    return _compile_key_pattern(config.key_pattern).match(text.strip()) is not None


def is_single_line_entry(text: str) -> bool:
    """Check whether a key's nested body closes on its own line.

    Such entries (``itemCompleted: { opacity: 0.65 },``) have no foldable
    range; handing them to an editor folds the enclosing block instead.
    """
    return SINGLE_LINE_CLOSER in text


def is_block_terminator(text: str, config: FoldConfig | None = None) -> bool:
    """Check whether a line is an explicit block closing token.

    Only the token half of the terminator rule; dedenting back to the marker's
    column is handled by the locator, which knows the open block.

    Examples:
        is_block_terminator("});")  # True
        is_block_terminator("  }")  # True
        is_block_terminator("  },")  # False
    """
    config = config or FoldConfig()
    trimmed = text.strip()
    if trimmed in config.terminator_tokens:
        return True
    return any(trimmed.startswith(prefix) for prefix in config.terminator_prefixes)


def classify_line(text: str, config: FoldConfig | None = None) -> LineKind:
    """Classify a line without any knowledge of the surrounding block.

    Precedence is blank, marker, terminator token, foldable key definition.
    Single-line entries classify as `LineKind.OTHER`.

    Args:
        text: Raw line text.
        config: Token and pattern configuration. Defaults to a new `FoldConfig`.

    Returns:
        LineKind: The line's classification.

    Examples:
        classify_line("const styles = stylex.create({")  # LineKind.BLOCK_MARKER
        classify_line("  label: {")  # LineKind.KEY_DEFINITION
        classify_line("  itemCompleted: { opacity: 0.65 },")  # LineKind.OTHER
    """
    config = config or FoldConfig()

    if is_blank(text):
        return LineKind.BLANK
    if is_block_marker(text, config):
        return LineKind.BLOCK_MARKER
    if is_block_terminator(text, config):
        return LineKind.BLOCK_TERMINATOR
    if is_key_definition(text, config) and not is_single_line_entry(text):
        return LineKind.KEY_DEFINITION
    return LineKind.OTHER
