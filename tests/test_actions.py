from __future__ import annotations

import textwrap

import pytest

from stylex_fold.actions import apply_intent, plan_intent
from stylex_fold.constants import UNBOUNDED_DEPTH
from stylex_fold.models import Document, FoldAction, FoldIntent, FoldRequest

SOURCE = textwrap.dedent(
    """\
    import * as stylex from '@stylexjs/stylex';

    const styles = stylex.create({
      container: {
        color: 'red',
      },
      itemCompleted: { opacity: 0.65 },
      label: {
        fontSize: 12,
      },
    });
    """
)


class RecordingActuator:
    def __init__(self):
        self.calls: list[tuple[str, list[int], int]] = []

    def fold(self, lines, levels):
        self.calls.append(("fold", list(lines), levels))

    def unfold(self, lines, levels):
        self.calls.append(("unfold", list(lines), levels))


@pytest.mark.parametrize(
    ("intent", "action", "depth", "lines"),
    [
        (FoldIntent.FOLD_NAMES, FoldAction.FOLD, 1, (3, 7)),
        (FoldIntent.FOLD_BLOCKS, FoldAction.FOLD, 1, (2,)),
        (FoldIntent.UNFOLD_NAMES, FoldAction.UNFOLD, 1, (2,)),
        (FoldIntent.UNFOLD_ALL, FoldAction.UNFOLD, UNBOUNDED_DEPTH, (2,)),
    ],
)
def test_plan_intent_table(intent, action, depth, lines):
    request = plan_intent(intent, Document.from_text(SOURCE))

    assert request == FoldRequest(intent=intent, action=action, depth=depth, lines=lines)


def test_plan_intent_without_document_is_noop():
    assert plan_intent(FoldIntent.FOLD_NAMES, None) is None


def test_plan_intent_without_matches_is_noop():
    document = Document.from_text("const x = 1;\n")

    for intent in FoldIntent:
        assert plan_intent(intent, document) is None


def test_apply_intent_forwards_to_actuator():
    actuator = RecordingActuator()

    request = apply_intent(FoldIntent.FOLD_NAMES, Document.from_text(SOURCE), actuator)

    assert request is not None
    assert actuator.calls == [("fold", [3, 7], 1)]


def test_apply_intent_unfold_all_uses_unbounded_depth():
    actuator = RecordingActuator()

    apply_intent(FoldIntent.UNFOLD_ALL, Document.from_text(SOURCE), actuator)

    assert actuator.calls == [("unfold", [2], UNBOUNDED_DEPTH)]


def test_apply_intent_skips_actuator_for_empty_line_set():
    actuator = RecordingActuator()

    result = apply_intent(FoldIntent.FOLD_BLOCKS, Document.from_text("let a;\n"), actuator)

    assert result is None
    assert actuator.calls == []


def test_apply_intent_skips_actuator_without_document():
    actuator = RecordingActuator()

    assert apply_intent(FoldIntent.UNFOLD_NAMES, None, actuator) is None
    assert actuator.calls == []


MIXED = "const styles = stylex.create({\n  spaced: {\n  },\n\ttabbed: {\n\t},\n});\n"


def test_plan_intent_forwards_warnings_for_key_intent():
    messages: list[str] = []

    request = plan_intent(FoldIntent.FOLD_NAMES, Document.from_text(MIXED), warn=messages.append)

    assert request is not None
    assert request.lines == (3,)
    assert len(messages) == 1


@pytest.mark.parametrize(
    "intent", [FoldIntent.FOLD_BLOCKS, FoldIntent.UNFOLD_NAMES, FoldIntent.UNFOLD_ALL]
)
def test_plan_intent_block_intents_never_warn(intent):
    messages: list[str] = []

    plan_intent(intent, Document.from_text(MIXED), warn=messages.append)

    assert messages == []


def test_apply_intent_forwards_warn():
    messages: list[str] = []

    apply_intent(
        FoldIntent.FOLD_NAMES, Document.from_text(MIXED), RecordingActuator(), warn=messages.append
    )

    assert len(messages) == 1
