"""Line classifier for LaTeX-style heading markers: \\name{title} or \\name*{title}."""
import re
from dataclasses import dataclass

# Full-line match only; no whitespace trimming around the marker.
_HEADING_RE = re.compile(r"\\([a-zA-Z]+)(\*?)\{(.+)\}")

COMMAND_LEVELS: dict[str, int] = {
    "title": 0,
    "chapter": 1,
    "section": 2,
    "subsection": 3,
    "subsubsection": 4,
    "paragraph": 5,
    "subparagraph": 6,
}
PREAMBLE_LEVEL = -1
UNKNOWN_LEVEL = 99


@dataclass(frozen=True)
class HeadingLine:
    name: str
    starred: bool
    title: str

    @property
    def command(self) -> str:
        """Command as written, e.g. 'section*'."""
        return self.name + ("*" if self.starred else "")

    @property
    def level(self) -> int:
        return level_for(self.name)


@dataclass(frozen=True)
class BodyLine:
    text: str


Line = HeadingLine | BodyLine


def level_for(name: str) -> int:
    """Hierarchy level of a command name; unknown commands get UNKNOWN_LEVEL."""
    return COMMAND_LEVELS.get(name.rstrip("*"), UNKNOWN_LEVEL)


def classify_line(line: str) -> Line:
    m = _HEADING_RE.fullmatch(line)
    if m is None:
        return BodyLine(line)
    return HeadingLine(name=m.group(1), starred=bool(m.group(2)), title=m.group(3))
