"""Tests for the windowed view, line-number decoration and UTF-16 offsets."""
import pytest

from editcore.selection.decoration import (
    decorate_lines,
    is_raw_text_document,
    is_windowed,
    strip_line_numbers,
)
from editcore.selection.offsets import index_from_utf16, utf16_offset
from editcore.selection.reconciler import reconcile_selection
from editcore.selection.viewport import WindowedView

DOC = "\n".join(f"row {i}" for i in range(1, 26))  # 25 lines


@pytest.fixture
def view() -> WindowedView:
    return WindowedView(DOC, window_size=10, scroll_step=2)


def test_initial_window(view: WindowedView) -> None:
    assert view.visible_lines[0] == "row 1"
    assert len(view.visible_lines) == 10
    m = view.metrics()
    assert (m.total_lines, m.window_start, m.window_end) == (25, 0, 10)
    assert m.has_more and not m.has_previous
    assert m.progress == 40


def test_char_range_counts_newlines(view: WindowedView) -> None:
    view.scroll("down")
    assert view.window_start == 2
    assert DOC[view.char_start : view.char_end] == view.visible_text
    assert view.visible_text.startswith("row 3")


def test_scroll_is_clamped(view: WindowedView) -> None:
    view.scroll("up")
    assert view.window_start == 0
    view.end()
    assert view.window_start == 15
    view.scroll("down")
    assert view.window_start == 15
    assert not view.metrics().has_more
    view.home()
    assert view.window_start == 0


def test_unknown_direction_raises(view: WindowedView) -> None:
    with pytest.raises(ValueError):
        view.scroll("sideways")  # type: ignore[arg-type]


def test_reveal_scrolls_minimally(view: WindowedView) -> None:
    offset = DOC.index("row 14")
    view.reveal(offset)
    assert view.window_start == 4
    assert "row 14" in view.visible_lines
    view.reveal(DOC.index("row 2\n"))
    assert view.window_start == 1


def test_short_document_window() -> None:
    small = WindowedView("only\ntwo", window_size=10)
    assert small.visible_lines == ["only", "two"]
    assert small.metrics().progress == 100
    small.end()
    assert small.window_start == 0


def test_rendered_selection_maps_back_to_document(view: WindowedView) -> None:
    view.jump_to_line(8)
    rendered = view.render().split("\n")
    assert rendered[0] == " 9 row 9"
    assert rendered[1] == "10 row 10"
    copied = "\n".join(rendered[1:3])
    sel = reconcile_selection(DOC, copied, decorated=True)
    assert sel is not None
    assert DOC[sel.start : sel.end] == "row 10\nrow 11"


def test_strip_line_numbers() -> None:
    assert strip_line_numbers("2 Line2") == "Line2"
    assert strip_line_numbers("  9 a\n10 b\n") == "a\nb"


def test_decorate_lines_alignment() -> None:
    assert decorate_lines(["a", "b"], first_line_number=9) == " 9 a\n10 b"
    assert decorate_lines([]) == ""


def test_raw_text_detection() -> None:
    assert is_raw_text_document("plain", file_name="manual.mmd")
    assert is_raw_text_document("\\section{Intro}\ntext")
    assert not is_raw_text_document("# Markdown heading\n\ntext")
    assert not is_windowed("\\section{A}")
    assert is_windowed("\\section{A}\n" + "x" * 600)


def test_utf16_offsets_with_astral_characters() -> None:
    text = "a😀b"
    assert utf16_offset(text, 0) == 0
    assert utf16_offset(text, 2) == 3
    assert utf16_offset(text, 3) == 4
    assert index_from_utf16(text, 3) == 2
    assert index_from_utf16(text, 4) == 3
    assert index_from_utf16(text, 2) == 1
    assert index_from_utf16("plain", 3) == 3


def test_line_of_offsets(view: WindowedView) -> None:
    assert view.line_of(0) == 0
    assert view.line_of(DOC.index("\n")) == 0
    assert view.line_of(DOC.index("row 3")) == 2
    assert view.line_of(len(DOC)) == 24
    assert view.line_of(-5) == 0
