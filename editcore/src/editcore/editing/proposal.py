"""Turn a model reply into a reviewable proposal over the full document."""
import re

from editcore.schemas import EditProposal, EditTarget, ModelReply

_EDIT_BLOCK_RE = re.compile(r"```markdown\n([\s\S]*?)\n```")


def parse_model_reply(text: str) -> ModelReply:
    """Split a reply into the first ```markdown block and the surrounding prose.

    A reply without such a block is a plain chat answer.
    """
    m = _EDIT_BLOCK_RE.search(text)
    if m is None:
        return ModelReply(edit=None, explanation=text.strip())
    explanation = (text[: m.start()] + text[m.end() :]).strip()
    return ModelReply(edit=m.group(1), explanation=explanation)


def splice(document: str, start: int, end: int, replacement: str) -> str:
    if not 0 <= start <= end <= len(document):
        raise ValueError(f"Invalid range [{start}, {end}) for document of length {len(document)}")
    return document[:start] + replacement + document[end:]


def _line_number(document: str, offset: int) -> int:
    return document.count("\n", 0, offset) + 1


def build_proposal(
    document: str,
    target: EditTarget,
    replacement: str,
    description: str | None = None,
) -> EditProposal:
    """Full-document before/after snapshots for replacing *target* with *replacement*."""
    if description is None:
        description = "AI Edit (Selection)" if target.mode == "selection" else "AI Edit (Smart Context)"
    return EditProposal(
        original=document,
        modified=splice(document, target.char_start, target.char_end, replacement),
        description=description,
        start_line=_line_number(document, target.char_start),
        end_line=_line_number(document, target.char_end),
    )
