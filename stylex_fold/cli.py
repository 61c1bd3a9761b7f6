"""
Prints the lines an editor should fold or unfold for a StyleX source file.
Editor integrations call this and forward the result to their fold commands.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
from .actions import plan_intent
from .config import ConfigError, build_config
from .exceptions import LocateFileError
from .filesystem import enforce_file_size, get_max_file_size, normalize_filepath
from .locator import read_document
from .models import FoldIntent

__all__ = ["cli"]


def _warn(message: str) -> None:
    click.echo(message, err=True)


@click.command()
@click.version_option()
@click.option(
    "--intent",
    type=click.Choice([intent.value for intent in FoldIntent]),
    default=FoldIntent.FOLD_NAMES.value,
    show_default=True,
    help="Folding command to plan",
)
@click.option("--marker", "markers", multiple=True, help="Block marker token (repeatable)")
@click.option("--max-line-length", type=int, help="Maximum line length")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format",
)
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    intent: str = FoldIntent.FOLD_NAMES.value,
    markers: tuple[str, ...] = (),
    max_line_length: int | None = None,
    output_format: str = "text",
):
    """
    Entry point for planning a fold or unfold over StyleX blocks.

    Args:
        filepath: Path to the source file to scan.
        intent: One of `fold-names`, `fold-blocks`, `unfold-names`, `unfold-all`.
        markers: Overrides for the block marker tokens.
        max_line_length: Override for the maximum line length.
        output_format: `text` prints ``<action> <depth> <lines>``; `json`
            prints an object with intent, action, depth and lines.

    Returns:
        None.

    Raises:
        click.BadParameter: If the path or configuration overrides are invalid.
        click.ClickException: If the file is too large, unreadable, or contains
            an overlong line.

    Examples:
        stylex-fold src/Button.tsx --intent fold-blocks --format json
    """
    try:
        config = build_config(
            Path(filepath).expanduser().resolve().parent,
            marker_tokens=markers,
            max_line_length=max_line_length,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        path = normalize_filepath(filepath, config.extensions)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        enforce_file_size(path, max_file_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    try:
        document = read_document(path, config)
    except LocateFileError as error:
        raise click.ClickException(str(error)) from error

    fold_intent = FoldIntent(intent)
    request = plan_intent(fold_intent, document, config, warn=_warn)

    if output_format == "json":
        payload = {
            "intent": fold_intent.value,
            "action": request.action.value if request else None,
            "depth": request.depth if request else None,
            "lines": list(request.lines) if request else [],
        }
        click.echo(json.dumps(payload))
    elif request is not None:
        lines = ",".join(str(line) for line in request.lines)
        click.echo(f"{request.action.value} {request.depth} {lines}")


if __name__ == "__main__":
    cli()
