"""Human-readable section listings for choosing edit targets."""
from editcore.schemas import SectionSummary
from editcore.structure.parser import Section


def display_text(section: Section) -> str:
    if section.is_preamble:
        return "[Preamble]"
    return f"\\{section.command_name}{{{section.title}}}"


def section_summaries(sections: list[Section]) -> list[SectionSummary]:
    return [
        SectionSummary(
            index=i,
            title=s.title,
            command=s.command_name,
            level=s.hierarchy_level,
            char_start=s.char_start,
            char_end=s.char_end,
            display_text=display_text(s),
        )
        for i, s in enumerate(sections)
    ]


def structure_summary(sections: list[Section]) -> str:
    """Numbered outline, one section per line: '0. [Preamble]', '1. \\section{Intro}'."""
    return "\n".join(f"{s.index}. {s.display_text}" for s in section_summaries(sections))
