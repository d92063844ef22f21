"""Keyword-frequency relevance ranking of chunks against a free-text query."""
import re

from editcore.chunking.base import Chunk
from editcore.structure.lines import COMMAND_LEVELS

HEADER_BONUS = 10
MIN_TERM_LENGTH = 3

_HEADER_RE = re.compile(
    r"\\(" + "|".join(sorted(COMMAND_LEVELS, key=len, reverse=True)) + r")\*?\{",
    re.IGNORECASE,
)


def query_terms(query: str, min_length: int = MIN_TERM_LENGTH) -> list[str]:
    """Lowercased whitespace tokens; tokens shorter than *min_length* are dropped."""
    return [t for t in query.lower().split() if len(t) >= min_length]


def has_heading_marker(text: str) -> bool:
    return _HEADER_RE.search(text) is not None


def score_chunk(
    chunk: Chunk,
    terms: list[str],
    header_bonus: int = HEADER_BONUS,
) -> int:
    """Sum of occurrences x term length, plus a flat bonus for heading markers."""
    text = chunk.content.lower()
    score = sum(text.count(t) * len(t) for t in terms)
    if has_heading_marker(chunk.content):
        score += header_bonus
    return score


def find_relevant_chunk(
    chunks: list[Chunk],
    query: str,
    header_bonus: int = HEADER_BONUS,
    min_term_length: int = MIN_TERM_LENGTH,
) -> Chunk:
    """Return the best-scoring chunk; ties keep the earliest, all-zero returns the first."""
    if not chunks:
        raise ValueError("No chunks provided")
    if len(chunks) == 1:
        return chunks[0]
    terms = query_terms(query, min_term_length)
    best = chunks[0]
    best_score = 0
    for c in chunks:
        score = score_chunk(c, terms, header_bonus)
        if score > best_score:
            best = c
            best_score = score
    return best
