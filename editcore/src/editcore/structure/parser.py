"""Structural parser: split a document into ordered, non-overlapping sections."""
from dataclasses import dataclass

from editcore.structure.lines import PREAMBLE_LEVEL, HeadingLine, classify_line

PREAMBLE_TITLE = "Preamble"
PREAMBLE_COMMAND = "preamble"


@dataclass(frozen=True)
class Section:
    """A span of the document headed by a marker (or the implicit preamble).

    Offsets are half-open: ``char_end`` equals the next section's
    ``char_start`` (or the document length). Line indices are 0-based and
    half-open in the same way.
    """

    title: str
    command_name: str
    hierarchy_level: int
    char_start: int
    char_end: int
    line_start: int
    line_end: int
    content: str

    @property
    def is_preamble(self) -> bool:
        return self.hierarchy_level == PREAMBLE_LEVEL


@dataclass
class _OpenSection:
    title: str
    command_name: str
    hierarchy_level: int
    char_start: int
    line_start: int

    def close(self, document: str, char_end: int, line_end: int) -> Section:
        return Section(
            title=self.title,
            command_name=self.command_name,
            hierarchy_level=self.hierarchy_level,
            char_start=self.char_start,
            char_end=char_end,
            line_start=self.line_start,
            line_end=line_end,
            content=document[self.char_start : char_end],
        )


def parse_structure(document: str) -> list[Section]:
    """Scan *document* line by line and return its sections in document order.

    Total over any string: no markers yields one preamble section, empty input
    yields no sections.
    """
    if not document:
        return []
    sections: list[Section] = []
    current: _OpenSection | None = None
    offset = 0
    lines = document.split("\n")
    for i, line in enumerate(lines):
        kind = classify_line(line)
        if isinstance(kind, HeadingLine):
            if current is not None:
                sections.append(current.close(document, offset, i))
            current = _OpenSection(
                title=kind.title,
                command_name=kind.command,
                hierarchy_level=kind.level,
                char_start=offset,
                line_start=i,
            )
        elif current is None:
            current = _OpenSection(
                title=PREAMBLE_TITLE,
                command_name=PREAMBLE_COMMAND,
                hierarchy_level=PREAMBLE_LEVEL,
                char_start=offset,
                line_start=i,
            )
        offset += len(line) + 1

    if current is not None:
        sections.append(current.close(document, len(document), len(lines)))
    return sections
