"""Constants used across the stylex-fold package."""

from __future__ import annotations

from .config import FoldConfig

DEFAULT_CONFIG = FoldConfig()

# A key whose nested body closes on the same line has no foldable range
SINGLE_LINE_CLOSER = "}"

# Block markers and configuration defaults
MARKER_TOKENS = DEFAULT_CONFIG.marker_tokens
SOURCE_EXTENSIONS = DEFAULT_CONFIG.extensions
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size

# Fold depths handed to the region actuator
SINGLE_LEVEL = 1
UNBOUNDED_DEPTH = 100
