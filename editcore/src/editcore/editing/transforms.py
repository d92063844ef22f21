"""Detect requests to change the markup format of the target (list, table, ...)."""
import re
from dataclasses import dataclass

# Checked in order; the first match wins.
_TRANSFORMS: list[tuple[str, re.Pattern[str]]] = [
    ("checkbox", re.compile(r"convert.*to.*checkbox|make.*checkbox|turn.*into.*checkbox|sections.*to.*checkbox")),
    ("mermaid", re.compile(r"make.*flowchart|create.*diagram|convert.*to.*mermaid|make.*sequence.*diagram|create.*chart")),
    ("list", re.compile(r"convert.*to.*list|make.*list|turn.*into.*list")),
    ("table", re.compile(r"convert.*to.*table|make.*table|turn.*into.*table")),
    ("heading", re.compile(r"convert.*to.*heading|make.*heading|turn.*into.*heading")),
    ("code", re.compile(r"convert.*to.*code|make.*code.*block|turn.*into.*code")),
    ("quote", re.compile(r"convert.*to.*quote|make.*quote|turn.*into.*quote")),
]

_INSTRUCTIONS: dict[str, list[str]] = {
    "checkbox": [
        "SPECIALIZED FORMAT TRANSFORMATION - CHECKBOX:",
        "- Convert headings/sections to checkbox format: - [ ] Item",
        "- Convert list items to checkboxes",
        "- Preserve the original text content",
        "- Use unchecked boxes by default: - [ ]",
        "- Maintain hierarchical structure if present",
    ],
    "mermaid": [
        "SPECIALIZED FORMAT TRANSFORMATION - MERMAID:",
        "- Wrap result in mermaid code block",
        "- Use appropriate mermaid syntax (flowchart, sequence, class, etc.)",
        "- For flowcharts: use 'flowchart TD' or 'flowchart LR'",
        "- For sequences: use 'sequenceDiagram'",
        "- Create proper node connections and relationships",
    ],
    "list": [
        "SPECIALIZED FORMAT TRANSFORMATION - LIST:",
        "- Convert text blocks to list items",
        "- Use - for bullet points or 1. for numbered lists",
        "- Preserve content hierarchy",
    ],
    "table": [
        "SPECIALIZED FORMAT TRANSFORMATION - TABLE:",
        "- Convert content to markdown table format",
        "- Use | for column separators",
        "- Include header row with alignment",
    ],
}


@dataclass(frozen=True)
class FormatTransform:
    kind: str | None
    message: str

    @property
    def is_transformation(self) -> bool:
        return self.kind is not None


def detect_format_transformation(message: str) -> FormatTransform:
    lowered = message.lower()
    for kind, pattern in _TRANSFORMS:
        if pattern.search(lowered):
            return FormatTransform(kind=kind, message=message)
    return FormatTransform(kind=None, message=message)


def transform_instructions(kind: str | None) -> str:
    """Extra guidance for *kind*; empty for kinds without dedicated rules."""
    return "\n".join(_INSTRUCTIONS.get(kind or "", []))
