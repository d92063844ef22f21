"""Chunker interface."""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Chunk:
    """A line-aligned slice of text; ``text[char_start:char_end]`` is its source span.

    ``content`` has trailing whitespace trimmed, the offsets do not.
    """

    content: str
    char_start: int
    char_end: int
    estimated_token_count: int


class BaseChunker(ABC):
    @abstractmethod
    def chunk(self, text: str) -> list[Chunk]:
        """Split text into ordered, contiguous chunks."""
        ...
