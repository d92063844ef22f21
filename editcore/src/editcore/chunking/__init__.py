from editcore.chunking.base import BaseChunker, Chunk
from editcore.chunking.budget import (
    CHAR_LIMITS,
    TOKEN_LIMITS,
    content_char_budget,
    estimate_token_count,
    validate_content_size,
)
from editcore.chunking.line_chunker import LineChunker, chunk_text
from editcore.chunking.ranker import find_relevant_chunk, query_terms, score_chunk
from editcore.chunking.truncation import truncate

__all__ = [
    "BaseChunker",
    "CHAR_LIMITS",
    "Chunk",
    "LineChunker",
    "TOKEN_LIMITS",
    "chunk_text",
    "content_char_budget",
    "estimate_token_count",
    "find_relevant_chunk",
    "query_terms",
    "score_chunk",
    "truncate",
    "validate_content_size",
]
