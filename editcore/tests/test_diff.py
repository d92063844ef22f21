"""Tests for the line diff engine and contextual compression."""
from editcore.diffing.line_diff import (
    ELLIPSIS,
    diff_stats,
    format_diff_for_display,
    generate_contextual_diff,
    generate_diff,
)


def test_identical_inputs_are_all_unchanged() -> None:
    text = "one\ntwo\nthree\n"
    lines = generate_diff(text, text)
    assert [line.kind for line in lines] == ["unchanged"] * 3
    assert [(line.old_line_number, line.new_line_number) for line in lines] == [(1, 1), (2, 2), (3, 3)]


def test_empty_original_is_all_added() -> None:
    lines = generate_diff("", "a\nb")
    assert [(line.content, line.kind) for line in lines] == [("a", "added"), ("b", "added")]
    assert [line.new_line_number for line in lines] == [1, 2]
    assert all(line.old_line_number is None for line in lines)


def test_empty_modified_is_all_removed() -> None:
    lines = generate_diff("a\nb\n", "")
    assert [line.kind for line in lines] == ["removed", "removed"]
    assert [line.old_line_number for line in lines] == [1, 2]


def test_both_empty_is_empty() -> None:
    assert generate_diff("", "") == []


def test_replacement_numbers_each_side_independently() -> None:
    lines = generate_diff("a\nb\nc\n", "a\nB\nc\n")
    assert [(line.kind, line.content) for line in lines] == [
        ("unchanged", "a"),
        ("removed", "b"),
        ("added", "B"),
        ("unchanged", "c"),
    ]
    assert (lines[1].old_line_number, lines[1].new_line_number) == (2, None)
    assert (lines[2].old_line_number, lines[2].new_line_number) == (None, 2)
    assert (lines[3].old_line_number, lines[3].new_line_number) == (3, 3)


def test_no_phantom_blank_line_from_trailing_newline() -> None:
    lines = generate_diff("x\n", "x\ny\n")
    assert [line.content for line in lines] == ["x", "y"]


def test_blank_lines_are_kept() -> None:
    lines = generate_diff("a\n\nb\n", "a\n\nb\n")
    assert [line.content for line in lines] == ["a", "", "b"]


def test_contextual_single_change_zero_context() -> None:
    lines = generate_contextual_diff("a\nb\nc", "a\nb\nX\nc", context_lines=0)
    assert len(lines) == 1
    assert (lines[0].content, lines[0].kind) == ("X", "added")


def test_contextual_separates_distant_hunks_with_ellipsis() -> None:
    original = "\n".join(f"line{i}" for i in range(1, 21)) + "\n"
    modified = original.replace("line2\n", "LINE2\n").replace("line18\n", "LINE18\n")
    lines = generate_contextual_diff(original, modified, context_lines=1)
    markers = [line for line in lines if line.content == ELLIPSIS]
    assert len(markers) == 1
    assert markers[0].kind == "unchanged"
    assert markers[0].old_line_number is None and markers[0].new_line_number is None
    contents = [line.content for line in lines]
    assert contents[: contents.index(ELLIPSIS)] == ["line1", "line2", "LINE2", "line3"]
    assert contents[contents.index(ELLIPSIS) + 1 :] == ["line17", "line18", "LINE18", "line19"]


def test_contextual_merges_adjacent_windows() -> None:
    original = "a\nb\nc\nd\ne\n"
    modified = "A\nb\nc\nD\ne\n"
    lines = generate_contextual_diff(original, modified, context_lines=1)
    assert ELLIPSIS not in [line.content for line in lines]


def test_contextual_without_changes_returns_full_diff() -> None:
    text = "a\nb\nc\n"
    assert generate_contextual_diff(text, text, context_lines=0) == generate_diff(text, text)


def test_display_and_stats() -> None:
    lines = generate_diff("a\nb\n", "a\nc\n")
    assert format_diff_for_display(lines) == "  a\n- b\n+ c"
    stats = diff_stats(lines)
    assert (stats.additions, stats.deletions) == (1, 1)
