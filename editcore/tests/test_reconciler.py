"""Tests for selection-to-offset reconciliation and its fallback stages."""
from editcore.schemas import Selection
from editcore.selection.reconciler import (
    exact_match,
    line_anchored,
    reconcile,
    reconcile_selection,
    revalidate_selection,
    word_anchored,
)

DOC = "Line1\nLine2\nLine3"

MANUAL = (
    "\\section{Valves}\n"
    "Globe valves   regulate flow.\n"
    "Ball valves shut off flow.\n"
    "Butterfly valves are light.\n"
)


def test_exact_match_offsets() -> None:
    sel = reconcile_selection(DOC, "Line2")
    assert sel is not None
    assert (sel.start, sel.end, sel.text) == (6, 11, "Line2")


def test_line_number_decoration_is_stripped() -> None:
    sel = reconcile_selection(DOC, "2 Line2", decorated=True)
    assert sel is not None
    assert (sel.start, sel.end, sel.text) == (6, 11, "Line2")


def test_multi_line_decorated_selection() -> None:
    sel = reconcile_selection(DOC, " 2 Line2\n 3 Line3", decorated=True)
    assert sel is not None
    assert (sel.start, sel.end) == (6, 17)
    assert DOC[sel.start : sel.end] == sel.text


def test_undecorated_mode_keeps_digits() -> None:
    """Rendered Markdown views carry no numbers, so leading digits are content."""
    doc = "Intro\n2 apples\n"
    sel = reconcile_selection(doc, "2 apples", decorated=False)
    assert sel is not None
    assert (sel.start, sel.end) == (6, 14)


def test_word_stage_after_whitespace_normalisation() -> None:
    selected = "Globe valves regulate flow.\nBall valves shut off flow."
    assert exact_match(MANUAL, selected) is None
    found = reconcile(MANUAL, selected)
    # First line was normalised too, so the word stage anchors on "Globe".
    assert found is not None
    assert found.strategy == "word"
    assert found.start == MANUAL.index("Globe")


def test_line_anchored_uses_first_and_last_lines() -> None:
    selected = "Ball valves shut off flow.\n\n  Butterfly valves are light.  "
    found = line_anchored(MANUAL, selected)
    assert found is not None
    assert found.start == MANUAL.index("Ball")
    assert found.end == MANUAL.index("light.") + len("light.")


def test_line_anchored_single_line_end() -> None:
    found = line_anchored(MANUAL, "   Ball valves shut off flow.   ")
    assert found is not None
    assert found.end - found.start == len("Ball valves shut off flow.")


def test_line_anchored_missing_last_line_estimates_end() -> None:
    selected = "Ball valves shut off flow.\nnot in the document"
    found = line_anchored(MANUAL, selected)
    assert found is not None
    assert found.end == found.start + len(selected)


def test_word_anchored_estimates_end_and_clamps() -> None:
    selected = "Butterfly valves are   light and more text beyond the end"
    found = word_anchored(MANUAL, selected)
    assert found is not None
    assert found.start == MANUAL.index("Butterfly")
    assert found.end == len(MANUAL)


def test_word_anchored_needs_word_longer_than_two() -> None:
    assert word_anchored(MANUAL, "an of to") is None


def test_stages_run_in_order() -> None:
    exact = reconcile(DOC, "Line2")
    line = reconcile(MANUAL, "Ball valves shut off flow.\n  Butterfly valves are light.")
    assert exact is not None and exact.strategy == "exact"
    assert line is not None and line.strategy == "line"


def test_unresolvable_selection_returns_none() -> None:
    assert reconcile_selection(DOC, "Completely absent") is None


def test_blank_selection_returns_none() -> None:
    assert reconcile_selection(DOC, "") is None
    assert reconcile_selection(DOC, "   \n  ") is None
    assert reconcile_selection(DOC, "12\n13", decorated=True) is None


def test_revalidate_keeps_fresh_offsets() -> None:
    sel = Selection(start=6, end=11, text="Line2")
    assert revalidate_selection(DOC, sel) == sel


def test_revalidate_rederives_after_document_change() -> None:
    sel = Selection(start=6, end=11, text="Line2")
    newer = "Inserted\n" + DOC
    fresh = revalidate_selection(newer, sel)
    assert fresh is not None
    assert newer[fresh.start : fresh.end] == "Line2"
    assert fresh.start == 15


def test_revalidate_drops_vanished_selection() -> None:
    sel = Selection(start=6, end=11, text="Line2")
    assert revalidate_selection("Line1\nLine3", sel) is None


def test_revalidate_never_uses_approximate_anchors() -> None:
    """Only the first word survives the change, so the old offsets are unusable."""
    sel = Selection(start=0, end=27, text="Globe valves regulate flow.")
    changed = "Intro\nGlobe pumps move water around.\nEnd"
    assert word_anchored(changed, sel.text) is not None
    assert revalidate_selection(changed, sel) is None


def test_approximate_selection_text_is_document_slice() -> None:
    sel = reconcile_selection(MANUAL, "Globe valves regulate flow.\nBall valves shut off flow.")
    assert sel is not None
    assert sel.text == MANUAL[sel.start : sel.end]
    assert revalidate_selection(MANUAL, sel) == sel
