"""Truncation policy: reduce oversized text to a single in-budget chunk."""
from shared.schemas import OperationContext, ensure_context

from editcore.chunking.line_chunker import LineChunker
from editcore.chunking.ranker import HEADER_BONUS, MIN_TERM_LENGTH, find_relevant_chunk
from editcore.schemas import TruncationResult


def truncate(
    text: str,
    max_chars: int,
    query: str | None = None,
    header_bonus: int = HEADER_BONUS,
    min_term_length: int = MIN_TERM_LENGTH,
    ctx: OperationContext | None = None,
) -> TruncationResult:
    """Keep exactly one chunk: the most relevant to *query*, else the first.

    Never reassembles several chunks; relevance is favoured over completeness.
    """
    if len(text) <= max_chars:
        return TruncationResult(
            text=text,
            truncated=False,
            original_length=len(text),
            char_start=0,
            char_end=len(text),
        )
    chunks = LineChunker(max_chars).chunk(text)
    if query:
        kept = find_relevant_chunk(
            chunks, query, header_bonus=header_bonus, min_term_length=min_term_length
        )
    else:
        kept = chunks[0]
    ensure_context(ctx).logger("chunking").warning(
        "content_truncated",
        original_length=len(text),
        max_chars=max_chars,
        chunks=len(chunks),
        kept_start=kept.char_start,
        query_directed=bool(query),
    )
    return TruncationResult(
        text=kept.content,
        truncated=True,
        original_length=len(text),
        char_start=kept.char_start,
        char_end=kept.char_start + len(kept.content),
    )
