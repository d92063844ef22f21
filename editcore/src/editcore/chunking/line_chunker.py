"""Line-aligned chunker bounded by a character budget."""
from editcore.chunking.base import BaseChunker, Chunk
from editcore.chunking.budget import CHARS_PER_TOKEN, estimate_token_count


class LineChunker(BaseChunker):
    """Accumulate whole lines until the next one would exceed ``max_chars``.

    Boundaries always fall on line breaks; a single line longer than the budget
    becomes its own chunk.
    """

    def __init__(self, max_chars: int, chars_per_token: int = CHARS_PER_TOKEN) -> None:
        self._max_chars = max_chars
        self._chars_per_token = chars_per_token

    def _make(self, text: str, start: int, end: int) -> Chunk:
        end = min(end, len(text))
        return Chunk(
            content=text[start:end].rstrip(),
            char_start=start,
            char_end=end,
            estimated_token_count=estimate_token_count(text[start:end], self._chars_per_token),
        )

    def chunk(self, text: str) -> list[Chunk]:
        if len(text) <= self._max_chars:
            return [
                Chunk(
                    content=text,
                    char_start=0,
                    char_end=len(text),
                    estimated_token_count=estimate_token_count(text, self._chars_per_token),
                )
            ]
        chunks: list[Chunk] = []
        start = 0
        buf_len = 0
        offset = 0
        for line in text.split("\n"):
            add = len(line) + 1
            if buf_len + add > self._max_chars and buf_len > 0:
                chunks.append(self._make(text, start, start + buf_len))
                start = offset
                buf_len = add
            else:
                buf_len += add
            offset += add
        if buf_len > 0:
            chunks.append(self._make(text, start, start + buf_len))
        return chunks


def chunk_text(text: str, max_chars: int) -> list[Chunk]:
    return LineChunker(max_chars).chunk(text)
