"""Map an on-screen text selection back to offsets in the canonical document.

Strategies are tried in order, each strictly less exact than the one before:

1. exact: the cleaned selection occurs verbatim.
2. line: anchor on the first non-blank line, and on the last one for
   multi-line selections (survives whitespace normalisation by renderers).
3. word: anchor on the first word longer than two characters of the first
   line; the end is estimated from the selection length.

No strategy matching means the selection is unusable; callers fall back to
whole-document targeting instead of guessing.
"""
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from shared.schemas import OperationContext, ensure_context

from editcore.schemas import Selection
from editcore.selection.decoration import clean_selection


@dataclass(frozen=True)
class Offsets:
    start: int
    end: int
    strategy: str


Strategy = Callable[[str, str], Offsets | None]


def _content_lines(text: str) -> list[str]:
    return [line for line in text.split("\n") if line.strip()]


def exact_match(document: str, cleaned: str) -> Offsets | None:
    idx = document.find(cleaned)
    if idx == -1:
        return None
    return Offsets(idx, idx + len(cleaned), "exact")


def line_anchored(document: str, cleaned: str) -> Offsets | None:
    lines = _content_lines(cleaned)
    if not lines:
        return None
    first = lines[0].strip()
    last = lines[-1].strip()
    start = document.find(first)
    if start == -1:
        return None
    if len(lines) > 1 and last != first:
        last_idx = document.find(last, start)
        end = last_idx + len(last) if last_idx != -1 else start + len(cleaned)
    else:
        end = start + len(first)
    return Offsets(start, min(end, len(document)), "line")


def word_anchored(document: str, cleaned: str) -> Offsets | None:
    lines = _content_lines(cleaned)
    if not lines:
        return None
    words = [w for w in lines[0].split() if len(w) > 2]
    if not words:
        return None
    start = document.find(words[0])
    if start == -1:
        return None
    return Offsets(start, min(start + len(cleaned), len(document)), "word")


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (exact_match, line_anchored, word_anchored)


def reconcile(
    document: str,
    cleaned: str,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    ctx: OperationContext | None = None,
) -> Offsets | None:
    """Run *strategies* in order and return the first hit, or None."""
    log = ensure_context(ctx).logger("selection")
    if not cleaned.strip():
        return None
    for strategy in strategies:
        found = strategy(document, cleaned)
        if found is not None:
            log.debug(
                "selection_reconciled",
                strategy=found.strategy,
                start=found.start,
                end=found.end,
            )
            return found
    log.warning(
        "selection_unresolved",
        selection_length=len(cleaned),
        preview=cleaned[:50],
    )
    return None


def reconcile_selection(
    document: str,
    raw_text: str,
    decorated: bool = False,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    ctx: OperationContext | None = None,
) -> Selection | None:
    """Resolve highlighted *raw_text* (possibly line-numbered) to a Selection.

    The returned text is the document slice at the resolved offsets, which
    differs from the cleaned input when an approximate strategy matched.
    """
    if not raw_text or not raw_text.strip():
        return None
    cleaned = clean_selection(raw_text, decorated)
    found = reconcile(document, cleaned, strategies, ctx=ctx)
    if found is None:
        return None
    return Selection(start=found.start, end=found.end, text=document[found.start : found.end])


def revalidate_selection(
    document: str,
    selection: Selection,
    ctx: OperationContext | None = None,
) -> Selection | None:
    """Check a selection against a possibly newer document snapshot.

    Offsets are kept when the text at them is unchanged. Otherwise they are
    re-derived from an exact occurrence of the text only, never from an
    approximate anchor; None when there is none.
    """
    if document[selection.start : selection.end] == selection.text:
        return selection
    ensure_context(ctx).logger("selection").info(
        "selection_stale",
        start=selection.start,
        end=selection.end,
    )
    found = reconcile(document, selection.text, strategies=(exact_match,), ctx=ctx)
    if found is None:
        return None
    return Selection(start=found.start, end=found.end, text=selection.text)
