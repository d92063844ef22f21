"""Tests for reply parsing and proposal construction."""
import pytest

from editcore.editing.proposal import build_proposal, parse_model_reply, splice
from editcore.schemas import EditTarget

DOC = "Line1\nLine2\nLine3"


def test_reply_with_edit_block() -> None:
    reply = parse_model_reply("Here you go:\n```markdown\nLINE2\n```\nTightened wording.")
    assert reply.edit == "LINE2"
    assert reply.explanation == "Here you go:\n\nTightened wording."


def test_reply_without_edit_block_is_chat_only() -> None:
    reply = parse_model_reply("  The section reads fine as is.  ")
    assert reply.edit is None
    assert reply.explanation == "The section reads fine as is."


def test_only_first_edit_block_is_used() -> None:
    reply = parse_model_reply("```markdown\nfirst\n```\n```markdown\nsecond\n```")
    assert reply.edit == "first"
    assert "second" in reply.explanation


def test_multi_line_edit_block() -> None:
    reply = parse_model_reply("```markdown\n\\section{A}\nbody\n```")
    assert reply.edit == "\\section{A}\nbody"


def test_splice() -> None:
    assert splice(DOC, 6, 11, "X") == "Line1\nX\nLine3"
    assert splice(DOC, 0, 0, "> ") == "> " + DOC
    assert splice(DOC, len(DOC), len(DOC), "!") == DOC + "!"


@pytest.mark.parametrize("start,end", [(-1, 2), (5, 4), (0, 99)])
def test_splice_rejects_bad_range(start: int, end: int) -> None:
    with pytest.raises(ValueError):
        splice(DOC, start, end, "x")


def test_build_proposal_for_selection() -> None:
    target = EditTarget(text="Line2", char_start=6, char_end=11, mode="selection")
    proposal = build_proposal(DOC, target, "LINE2")
    assert proposal.original == DOC
    assert proposal.modified == "Line1\nLINE2\nLine3"
    assert proposal.description == "AI Edit (Selection)"
    assert (proposal.start_line, proposal.end_line) == (2, 2)


def test_build_proposal_spanning_lines() -> None:
    target = EditTarget(text="Line2\nLine3", char_start=6, char_end=len(DOC), mode="sections")
    proposal = build_proposal(DOC, target, "merged", description="Merge tail")
    assert proposal.modified == "Line1\nmerged"
    assert proposal.description == "Merge tail"
    assert (proposal.start_line, proposal.end_line) == (2, 3)


def test_build_proposal_default_description_for_document() -> None:
    target = EditTarget(text=DOC, char_start=0, char_end=len(DOC), mode="document")
    assert build_proposal(DOC, target, "new").description == "AI Edit (Smart Context)"
