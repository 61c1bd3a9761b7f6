"""Filesystem helpers for stylex-fold."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .constants import DEFAULT_MAX_FILE_SIZE, SOURCE_EXTENSIONS

MAX_FILE_SIZE_ENV_VAR = "STYLEX_FOLD_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["STYLEX_FOLD_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def normalize_filepath(raw_path: str, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> Path:
    """Resolve and validate the path of a source file to scan.

    Args:
        raw_path: User-supplied path (absolute or relative, ``~`` expanded).
        extensions: Accepted file suffixes, compared case-insensitively.

    Returns:
        Path: Absolute path to the file.

    Raises:
        ValueError: If the path does not exist, is not a regular file, or has
            an unsupported extension.

    Examples:
        normalize_filepath("src/Button.tsx")
    """
    path = Path(raw_path).expanduser()

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        error_message = f"{path} does not exist."
        raise ValueError(error_message) from error
    except OSError as error:
        error_message = f"Error resolving {path}: {error}"
        raise ValueError(error_message) from error

    if not resolved.is_file():
        error_message = f"{resolved} is not a regular file."
        raise ValueError(error_message)

    allowed = tuple(extension.lower() for extension in extensions)
    if resolved.suffix.lower() not in allowed:
        error_message = f"{resolved} is not a JavaScript or TypeScript source file.\n"
        error_message += f"Supported extensions are: {', '.join(allowed)}"
        raise ValueError(error_message)

    return resolved


def enforce_file_size(filepath: Path, max_size: int):
    """Guard against files that exceed the configured maximum size.

    Args:
        filepath: Path to the file being checked.
        max_size: Maximum allowed size in bytes.

    Returns:
        None.

    Raises:
        IOError: If the file cannot be inspected, is not a regular file, or is
            larger than `max_size`.

    Examples:
        enforce_file_size(Path("src/Button.tsx"), 102400)
    """
    try:
        stat_result = os.stat(filepath)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error

    if not stat.S_ISREG(stat_result.st_mode):
        error_message = f"{filepath} is not a regular file."
        raise IOError(error_message)

    if stat_result.st_size > max_size:
        error_message = f"{filepath} exceeds the maximum allowed size of {max_size} bytes."
        raise IOError(error_message)


def safe_read(filepath: Path) -> TextIO:
    """Open a file for reading with consistent error handling.

    Args:
        filepath: Path to the file.

    Returns:
        TextIO: File handle opened for reading in UTF-8.

    Raises:
        IOError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_read(Path("src/Button.tsx")) as handle:
            first_line = handle.readline()
    """
    try:
        return open(filepath, "r", encoding="UTF-8")
    except (
        FileNotFoundError,
        PermissionError,
        IsADirectoryError,
        NotADirectoryError,
    ) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error
