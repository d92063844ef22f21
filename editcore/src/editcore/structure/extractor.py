"""Section extraction: the minimal contiguous span covering a set of sections."""
from shared.schemas import OperationContext, ensure_context

from editcore.schemas import SectionExtraction
from editcore.structure.parser import parse_structure


def extract_sections(
    document: str,
    section_indices: list[int],
    ctx: OperationContext | None = None,
) -> SectionExtraction:
    """Return the span from the first to the last selected section.

    Sections lying between non-adjacent indices are included. An empty index
    list or any out-of-range index fails open to the whole document.
    """
    log = ensure_context(ctx).logger("structure")
    sections = parse_structure(document)
    whole = SectionExtraction(text=document, char_start=0, char_end=len(document))
    if not section_indices:
        return whole
    if any(i < 0 or i >= len(sections) for i in section_indices):
        log.info(
            "section_extraction_fail_open",
            indices=list(section_indices),
            sections_found=len(sections),
        )
        return whole

    selected = [sections[i] for i in sorted(set(section_indices))]
    char_start = min(s.char_start for s in selected)
    char_end = max(s.char_end for s in selected)
    log.debug(
        "sections_extracted",
        indices=sorted(set(section_indices)),
        char_start=char_start,
        char_end=char_end,
    )
    return SectionExtraction(
        text=document[char_start:char_end],
        char_start=char_start,
        char_end=char_end,
        sections=selected,
    )
