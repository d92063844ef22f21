"""Windowed (virtualized) raw-text view: which lines are visible and where they sit."""
import bisect
from dataclasses import dataclass
from typing import Literal

from editcore.selection.decoration import decorate_lines

WINDOW_SIZE = 10
SCROLL_STEP = 2


@dataclass(frozen=True)
class WindowMetrics:
    total_lines: int
    window_start: int
    window_end: int
    has_more: bool
    has_previous: bool
    progress: int


class WindowedView:
    """A fixed-height window of lines over an immutable document snapshot.

    ``window_start`` is a 0-based line index; the window spans
    ``[window_start, window_end)``.
    """

    def __init__(
        self,
        document: str,
        window_size: int = WINDOW_SIZE,
        scroll_step: int = SCROLL_STEP,
        window_start: int = 0,
    ) -> None:
        self._document = document
        self._lines = document.split("\n")
        self._window_size = max(1, window_size)
        self._scroll_step = max(1, scroll_step)
        self._start = 0
        self._line_offsets = self._compute_line_offsets()
        self.jump_to_line(window_start)

    def _compute_line_offsets(self) -> list[int]:
        offsets = []
        pos = 0
        for line in self._lines:
            offsets.append(pos)
            pos += len(line) + 1
        return offsets

    @property
    def document(self) -> str:
        return self._document

    @property
    def window_start(self) -> int:
        return self._start

    @property
    def window_end(self) -> int:
        return min(self._start + self._window_size, len(self._lines))

    @property
    def visible_lines(self) -> list[str]:
        return self._lines[self._start : self.window_end]

    @property
    def visible_text(self) -> str:
        return "\n".join(self.visible_lines)

    @property
    def char_start(self) -> int:
        return self._line_offsets[self._start]

    @property
    def char_end(self) -> int:
        return self.char_start + len(self.visible_text)

    def metrics(self) -> WindowMetrics:
        total = len(self._lines)
        end = self.window_end
        return WindowMetrics(
            total_lines=total,
            window_start=self._start,
            window_end=end,
            has_more=end < total,
            has_previous=self._start > 0,
            progress=round(end / total * 100) if total else 0,
        )

    def _max_start(self) -> int:
        return max(0, len(self._lines) - self._window_size)

    def jump_to_line(self, line_index: int) -> None:
        self._start = max(0, min(line_index, self._max_start()))

    def scroll(self, direction: Literal["up", "down"]) -> None:
        if direction == "up":
            self.jump_to_line(self._start - self._scroll_step)
        elif direction == "down":
            self.jump_to_line(self._start + self._scroll_step)
        else:
            raise ValueError(f"Unknown scroll direction {direction!r}")

    def home(self) -> None:
        self.jump_to_line(0)

    def end(self) -> None:
        self.jump_to_line(self._max_start())

    def line_of(self, offset: int) -> int:
        """0-based line index containing character *offset*."""
        offset = max(0, min(offset, len(self._document)))
        return bisect.bisect_right(self._line_offsets, offset) - 1

    def reveal(self, offset: int) -> None:
        """Scroll the minimum amount so the line holding *offset* is visible."""
        line = self.line_of(offset)
        if line < self._start:
            self.jump_to_line(line)
        elif line >= self.window_end:
            self.jump_to_line(line - self._window_size + 1)

    def render(self) -> str:
        """Visible lines with their 1-based line numbers, as the raw view shows them."""
        return decorate_lines(self.visible_lines, first_line_number=self._start + 1)
