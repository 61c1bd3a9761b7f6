"""Map folding intents to locator results and hand them to an editor."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from .config import FoldConfig
from .constants import SINGLE_LEVEL, UNBOUNDED_DEPTH
from .locator import find_block_lines, find_key_lines
from .models import Document, FoldAction, FoldIntent, FoldRequest


class RegionActuator(Protocol):
    """Editor surface that collapses or expands regions by header line.

    Implementations must leave regions not starting at the given lines alone.
    They are never called with an empty line set.
    """

    def fold(self, lines: Sequence[int], levels: int) -> None: ...

    def unfold(self, lines: Sequence[int], levels: int) -> None: ...


# intent -> (locator, action, depth)
INTENT_TABLE: dict[FoldIntent, tuple[Callable[..., list[int]], FoldAction, int]] = {
    FoldIntent.FOLD_NAMES: (find_key_lines, FoldAction.FOLD, SINGLE_LEVEL),
    FoldIntent.FOLD_BLOCKS: (find_block_lines, FoldAction.FOLD, SINGLE_LEVEL),
    FoldIntent.UNFOLD_NAMES: (find_block_lines, FoldAction.UNFOLD, SINGLE_LEVEL),
    FoldIntent.UNFOLD_ALL: (find_block_lines, FoldAction.UNFOLD, UNBOUNDED_DEPTH),
}


def plan_intent(
    intent: FoldIntent,
    document: Document | None,
    config: FoldConfig | None = None,
    warn: Callable[[str], None] | None = None,
) -> FoldRequest | None:
    """Compute the fold request for an intent.

    Args:
        intent: Command to plan.
        document: Current document, or None when no editor is active.
        config: Token and pattern configuration. Defaults to a new `FoldConfig`.
        warn: Optional callback for non-fatal diagnostics. Only the key
            locator reports any, so block-only intents never call it.

    Returns:
        FoldRequest | None: The request, or None when there is nothing to act on.

    Examples:
        plan_intent(FoldIntent.FOLD_NAMES, Document.from_text(source))
    """
    if document is None:
        return None

    locator, action, depth = INTENT_TABLE[intent]
    if locator is find_key_lines:
        lines = find_key_lines(document, config, warn)
    else:
        lines = locator(document, config)
    if not lines:
        return None

    return FoldRequest(intent=intent, action=action, depth=depth, lines=tuple(lines))


def apply_intent(
    intent: FoldIntent,
    document: Document | None,
    actuator: RegionActuator,
    config: FoldConfig | None = None,
    warn: Callable[[str], None] | None = None,
) -> FoldRequest | None:
    """Plan an intent and forward a non-empty result to the actuator.

    Returns:
        FoldRequest | None: The request that was applied, or None when the
            actuator was not called.
    """
    request = plan_intent(intent, document, config, warn)
    if request is None:
        return None

    if request.action is FoldAction.FOLD:
        actuator.fold(list(request.lines), request.depth)
    else:
        actuator.unfold(list(request.lines), request.depth)
    return request
