"""Configuration loading and management."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path


@dataclass
class FoldConfig:
    """Configuration for locating foldable StyleX regions.

    Attributes:
        marker_tokens: Literal substrings that open a style block.
        terminator_tokens: Trimmed lines equal to one of these close a block.
        terminator_prefixes: Trimmed lines starting with one of these close a block.
        key_pattern: Regular expression matched at the start of a trimmed line
            to recognize a key that opens a nested object.
        extensions: File suffixes accepted by the CLI.
        max_file_size: Maximum file size in bytes that will be scanned.
        max_line_length: Maximum line length allowed when reading files.

    Examples:
        FoldConfig(marker_tokens=("css.create",))
    """

    # Block detection
    marker_tokens: tuple[str, ...] = ("stylex.create", "stylex.keyframes")
    terminator_tokens: tuple[str, ...] = ("}",)
    terminator_prefixes: tuple[str, ...] = ("});",)

    # Key detection
    key_pattern: str = r"""^['"]?[^'":\s]+['"]?\s*:\s*(\(.*\)\s*=>\s*)?\(?\{"""

    # Files
    extensions: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs", ".mts", ".cts")

    # Limits
    max_file_size: int = 10 * 1024 * 1024
    max_line_length: int = 10_000


_TUPLE_FIELDS = ("marker_tokens", "terminator_tokens", "terminator_prefixes", "extensions")


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`marker_tokens` must not be empty")
    """


def load_config(search_path: Path) -> FoldConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.stylex-fold]`` table from `pyproject.toml` and the
    ``[stylex-fold]`` or ``[tool.stylex-fold]`` table from `.stylex-fold.toml`
    when present. TOML files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        FoldConfig: Loaded configuration, or defaults when nothing is found.

    Raises:
        ConfigError: If a matching table is not a mapping or contains unsupported keys.

    Examples:
        load_config(Path("src/components"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "stylex-fold")]
        )
        if pyproject_config is not None:
            return normalize_config(pyproject_config)

        dotfile_config = _load_from_file(
            current / ".stylex-fold.toml",
            table_paths=[("stylex-fold",), ("tool", "stylex-fold")],
        )
        if dotfile_config is not None:
            return normalize_config(dotfile_config)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return FoldConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> FoldConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> FoldConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys use dashes or underscores interchangeably
    raw_config = {key.replace("-", "_"): value for key, value in raw_config.items()}
    known = {field.name for field in fields(FoldConfig)}
    unknown = sorted(set(raw_config) - known)
    if unknown:
        raise ConfigError(
            f"Invalid `[{table_display}]` settings in {config_file}: "
            f"unknown keys {', '.join(unknown)}"
        )

    return FoldConfig(**raw_config)


def normalize_config(config: FoldConfig) -> FoldConfig:
    """Coerce list-valued settings (as read from TOML) into tuples.

    A bare string is treated as a single-element sequence.
    """
    changes = {}
    for name in _TUPLE_FIELDS:
        value = getattr(config, name)
        if isinstance(value, str):
            changes[name] = (value,)
        elif isinstance(value, list):
            changes[name] = tuple(value)
    if not changes:
        return config
    return replace(config, **changes)


def validate_config(config: FoldConfig) -> None:
    """Validate a `FoldConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If token lists are empty or hold non-string or empty
            entries, the key pattern does not compile, extensions are malformed,
            or numeric limits are non-positive.

    Examples:
        validate_config(FoldConfig(max_line_length=200))
    """
    config = normalize_config(config)

    _ensure_tokens(
        {
            "marker_tokens": config.marker_tokens,
            "terminator_tokens": config.terminator_tokens,
        }
    )
    # Prefix terminators are optional
    if config.terminator_prefixes:
        _ensure_tokens({"terminator_prefixes": config.terminator_prefixes})

    if not isinstance(config.key_pattern, str) or not config.key_pattern:
        raise ConfigError("`key_pattern` must be a non-empty string")
    try:
        re.compile(config.key_pattern)
    except re.error as error:
        raise ConfigError(f"`key_pattern` is not a valid regular expression: {error}") from error

    _ensure_tokens({"extensions": config.extensions})
    for extension in config.extensions:
        if not extension.startswith("."):
            raise ConfigError(f"`extensions` entries must start with '.', got {extension!r}")

    _ensure_integers(
        {
            "max_file_size": config.max_file_size,
            "max_line_length": config.max_line_length,
        }
    )
    _ensure_positive(
        {
            "max_file_size": config.max_file_size,
            "max_line_length": config.max_line_length,
        }
    )


def apply_overrides(config: FoldConfig, **overrides: object) -> FoldConfig:
    """Apply override values to a `FoldConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None or empty tuples are ignored.

    Returns:
        FoldConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `FoldConfig`.

    Examples:
        updated = apply_overrides(config, marker_tokens=("css.create",))
    """
    changes = {key: value for key, value in overrides.items() if value is not None and value != ()}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> FoldConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes.

    Returns:
        FoldConfig: Validated configuration ready for scanning.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), marker_tokens=("stylex.create",))
    """
    config = load_config(search_path)
    try:
        config = apply_overrides(config, **overrides)
    except TypeError as error:
        raise ConfigError(str(error)) from error
    config = normalize_config(config)
    validate_config(config)
    return config


def _ensure_tokens(values: dict[str, object]) -> None:
    for key, tokens in values.items():
        if not isinstance(tokens, tuple) or not tokens:
            raise ConfigError(f"`{key}` must be a non-empty list of strings")
        for token in tokens:
            if not isinstance(token, str) or not token:
                raise ConfigError(f"`{key}` must contain only non-empty strings")


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
