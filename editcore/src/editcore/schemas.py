"""Payloads exchanged with the UI and model-invocation collaborators."""
from typing import Literal

from pydantic import BaseModel, Field

from editcore.structure.parser import Section

DiffKind = Literal["added", "removed", "unchanged"]
TargetMode = Literal["selection", "sections", "document"]


class Selection(BaseModel):
    """A user selection resolved to offsets in the canonical document."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    text: str


class EditProposal(BaseModel):
    """Before/after snapshots of a proposed edit awaiting accept or reject."""

    original: str
    modified: str
    description: str
    start_line: int | None = None
    end_line: int | None = None


class DiffLine(BaseModel):
    content: str
    kind: DiffKind
    old_line_number: int | None = None
    new_line_number: int | None = None


class DiffStats(BaseModel):
    additions: int = 0
    deletions: int = 0


class SizeValidation(BaseModel):
    valid: bool
    estimated_tokens: int
    max_tokens: int
    suggestion: str | None = None


class TruncationResult(BaseModel):
    text: str
    truncated: bool
    original_length: int
    char_start: int = 0
    char_end: int = 0


class SectionSummary(BaseModel):
    index: int
    title: str
    command: str
    level: int
    char_start: int
    char_end: int
    display_text: str


class SectionExtraction(BaseModel):
    """Contiguous span covering the targeted sections (or the whole document)."""

    text: str
    char_start: int
    char_end: int
    sections: list[Section] = Field(default_factory=list)


class EditTarget(BaseModel):
    """The slice of the document handed to the model as the editing target."""

    text: str
    char_start: int
    char_end: int
    mode: TargetMode
    truncated: bool = False
    original_length: int = 0
    section_indices: list[int] = Field(default_factory=list)


class FormatValidation(BaseModel):
    valid: bool
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class ModelReply(BaseModel):
    """A model response split into the proposed edit and the chat explanation."""

    edit: str | None = None
    explanation: str = ""
