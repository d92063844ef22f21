"""Line-level diff between two document versions, with contextual compression."""
import re
from difflib import SequenceMatcher

from editcore.schemas import DiffKind, DiffLine, DiffStats

ELLIPSIS = "..."

# A line keeps its newline so "b" and "b\n" compare as different lines.
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def _tokens(text: str) -> list[str]:
    return _LINE_RE.findall(text)


def _block_lines(tokens: list[str]) -> list[str]:
    """Split a change block into display lines, dropping the phantom trailing ''."""
    lines = "".join(tokens).split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _edit_script(original: str, modified: str) -> list[tuple[DiffKind, list[str]]]:
    old = _tokens(original)
    new = _tokens(modified)
    matcher = SequenceMatcher(None, old, new, autojunk=False)
    blocks: list[tuple[DiffKind, list[str]]] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            blocks.append(("unchanged", old[i1:i2]))
            continue
        if i2 > i1:
            blocks.append(("removed", old[i1:i2]))
        if j2 > j1:
            blocks.append(("added", new[j1:j2]))
    return blocks


def generate_diff(original: str, modified: str) -> list[DiffLine]:
    """Tag every line added/removed/unchanged with 1-based old/new line numbers.

    Never raises; an empty side yields an all-added or all-removed sequence.
    """
    result: list[DiffLine] = []
    old_no = 1
    new_no = 1
    for kind, tokens in _edit_script(original, modified):
        for line in _block_lines(tokens):
            if kind == "added":
                result.append(DiffLine(content=line, kind=kind, new_line_number=new_no))
                new_no += 1
            elif kind == "removed":
                result.append(DiffLine(content=line, kind=kind, old_line_number=old_no))
                old_no += 1
            else:
                result.append(
                    DiffLine(
                        content=line,
                        kind=kind,
                        old_line_number=old_no,
                        new_line_number=new_no,
                    )
                )
                old_no += 1
                new_no += 1
    return result


def _merge_windows(windows: list[tuple[int, int]]) -> list[tuple[int, int]]:
    merged: list[tuple[int, int]] = []
    for start, end in sorted(windows):
        if merged and start <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def generate_contextual_diff(
    original: str,
    modified: str,
    context_lines: int = 3,
) -> list[DiffLine]:
    """Changed lines plus *context_lines* of surrounding context.

    Separate hunks are joined by an unchanged '...' line with no line numbers.
    With no changes the full diff is returned as is.
    """
    lines = generate_diff(original, modified)
    changed = [i for i, line in enumerate(lines) if line.kind != "unchanged"]
    if not changed:
        return lines
    last = len(lines) - 1
    windows = [(max(0, i - context_lines), min(last, i + context_lines)) for i in changed]
    out: list[DiffLine] = []
    for n, (start, end) in enumerate(_merge_windows(windows)):
        if n > 0:
            out.append(DiffLine(content=ELLIPSIS, kind="unchanged"))
        out.extend(lines[start : end + 1])
    return out


def format_diff_for_display(lines: list[DiffLine]) -> str:
    prefixes = {"added": "+ ", "removed": "- ", "unchanged": "  "}
    return "\n".join(prefixes[line.kind] + line.content for line in lines)


def diff_stats(lines: list[DiffLine]) -> DiffStats:
    return DiffStats(
        additions=sum(1 for line in lines if line.kind == "added"),
        deletions=sum(1 for line in lines if line.kind == "removed"),
    )
