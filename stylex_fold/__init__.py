"""
stylex-fold: locate foldable StyleX regions without parsing JavaScript.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    stylex-fold src/Button.tsx --intent fold-names

Library Usage:
    from pathlib import Path
    from stylex_fold import Document, find_block_lines, find_key_lines

    document = Document.from_text(Path("src/Button.tsx").read_text())
    block_lines = find_block_lines(document)
    key_lines = find_key_lines(document)
"""

from .actions import RegionActuator, apply_intent, plan_intent
from .classifier import classify_line, is_block_marker, is_key_definition
from .config import ConfigError, FoldConfig
from .exceptions import LineTooLongError, LocateFileError, StylexFoldError
from .locator import find_block_lines, find_block_regions, find_key_lines, read_document
from .models import BlockRegion, Document, FoldAction, FoldIntent, FoldRequest, LineKind

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "find_block_lines",
    "find_key_lines",
    "find_block_regions",
    "classify_line",
    "is_block_marker",
    "is_key_definition",
    # Intents
    "plan_intent",
    "apply_intent",
    "RegionActuator",
    # Data models
    "Document",
    "LineKind",
    "BlockRegion",
    "FoldIntent",
    "FoldAction",
    "FoldRequest",
    # Configuration and I/O
    "FoldConfig",
    "read_document",
    # Exceptions
    "ConfigError",
    "LineTooLongError",
    "LocateFileError",
    "StylexFoldError",
    # Version
    "__version__",
]
