"""Format preservation: analyse, instruct, validate and re-indent edited text."""
import re
from dataclasses import dataclass, field
from typing import Literal

from editcore.schemas import FormatValidation

IndentationType = Literal["tabs", "spaces", "mixed", "none"]
LineEndingType = Literal["unix", "windows", "mixed"]

_LATEX_COMMAND_RE = re.compile(r"\\[a-zA-Z]+\*?\{")
_LATEX_COMMAND_FULL_RE = re.compile(r"\\([a-zA-Z]+\*?)\{[^}]*\}")
_SPECIAL_CHARS_RE = re.compile(r"[\\{}$%&~#^_]")
_MATH_RE = re.compile(r"\$.*?\$|\\\(.*?\\\)|\\\[.*?\\\]")
_CODE_RE = re.compile(r"```.*?```|`[^`]+`")
_SECTION_RE = re.compile(r"\\(section|subsection|subsubsection)\*?\{")
_CHAPTER_RE = re.compile(r"\\chapter\*?\{")
_TITLE_RE = re.compile(r"\\title\*?\{")

SPECIAL_CHAR_TOLERANCE = 2


@dataclass(frozen=True)
class FormattingAnalysis:
    has_latex_commands: bool
    indentation_type: IndentationType
    line_ending_type: LineEndingType
    has_special_chars: bool
    has_math_expressions: bool
    has_code_blocks: bool
    structure: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class FormatOptions:
    preserve_latex_commands: bool = True
    preserve_indentation: bool = True
    preserve_line_breaks: bool = True
    preserve_special_chars: bool = True


def detect_indentation(content: str) -> IndentationType:
    indented = [line for line in content.split("\n") if line[:1].isspace()]
    if not indented:
        return "none"
    has_spaces = any(line.startswith(" ") for line in indented)
    has_tabs = any(line.startswith("\t") for line in indented)
    if has_spaces and has_tabs:
        return "mixed"
    if has_tabs:
        return "tabs"
    if has_spaces:
        return "spaces"
    return "none"


def detect_line_endings(content: str) -> LineEndingType:
    crlf = content.count("\r\n")
    lf = content.count("\n")
    if crlf and lf > crlf:
        return "mixed"
    if crlf:
        return "windows"
    return "unix"


def analyze_formatting(content: str) -> FormattingAnalysis:
    return FormattingAnalysis(
        has_latex_commands=bool(_LATEX_COMMAND_RE.search(content)),
        indentation_type=detect_indentation(content),
        line_ending_type=detect_line_endings(content),
        has_special_chars=bool(_SPECIAL_CHARS_RE.search(content)),
        has_math_expressions=bool(_MATH_RE.search(content)),
        has_code_blocks=bool(_CODE_RE.search(content)),
        structure={
            "sections": len(_SECTION_RE.findall(content)),
            "chapters": len(_CHAPTER_RE.findall(content)),
            "titles": len(_TITLE_RE.findall(content)),
        },
    )


def formatting_instructions(
    content: str,
    is_selection: bool = False,
    options: FormatOptions | None = None,
) -> str:
    """Preservation rules for the model, tailored to what *content* contains."""
    opts = options or FormatOptions()
    analysis = analyze_formatting(content)
    out = ["CRITICAL FORMATTING REQUIREMENTS:"]

    if analysis.has_latex_commands and opts.preserve_latex_commands:
        out.extend(
            [
                "- NEVER modify LaTeX command syntax: \\section{}, \\title{}, \\chapter{}, \\begin{}, \\end{}",
                "- NEVER add or remove backslashes, braces, or special characters",
                "- Only modify content INSIDE braces {} when specifically requested",
                "- Keep command structure identical: \\title{CONTENT} stays \\title{MODIFIED_CONTENT}",
            ]
        )
    if analysis.indentation_type != "none" and opts.preserve_indentation:
        kind = "tab" if analysis.indentation_type == "tabs" else "space"
        out.append(f"- Maintain {kind} indentation exactly")
    if opts.preserve_line_breaks:
        out.append("- Preserve all line breaks and paragraph spacing")
        out.append("- Keep empty lines exactly as they appear")
    if analysis.has_special_chars and opts.preserve_special_chars:
        out.append("- NEVER add characters like ~, +, &, %, #, ^, _ unless in original text")
        out.append("- Preserve ALL special characters (\\, {}, $, %, &, ~, #, ^, _) exactly")
    if analysis.has_math_expressions:
        out.append("- Keep mathematical expressions and their delimiters unchanged")
    if analysis.has_code_blocks:
        out.append("- Preserve code blocks and inline code formatting")

    out.append("- Make MINIMAL changes - only edit what was specifically requested")
    out.append('- Do NOT "improve" or "fix" formatting unless asked')
    if is_selection:
        out.append("- Return ONLY the modified selected text, maintaining its exact format")
    else:
        out.append("- Return the complete edited content with preserved structure")
    return "\n".join(out)


def latex_commands(content: str) -> list[str]:
    return _LATEX_COMMAND_FULL_RE.findall(content)


def validate_format_preservation(original: str, modified: str) -> FormatValidation:
    issues: list[str] = []
    suggestions: list[str] = []
    before = analyze_formatting(original)
    after = analyze_formatting(modified)

    if before.has_latex_commands and len(latex_commands(original)) != len(latex_commands(modified)):
        issues.append("LaTeX command count mismatch")
        suggestions.append("Ensure all original LaTeX commands are preserved")

    if before.indentation_type != "none" and before.indentation_type != after.indentation_type:
        issues.append("Indentation pattern changed")
        suggestions.append(f"Maintain {before.indentation_type} indentation")

    drift = abs(len(_SPECIAL_CHARS_RE.findall(original)) - len(_SPECIAL_CHARS_RE.findall(modified)))
    if drift > SPECIAL_CHAR_TOLERANCE:
        issues.append("Significant change in special characters")
        suggestions.append("Preserve special characters unless specifically editing them")

    return FormatValidation(valid=not issues, issues=issues, suggestions=suggestions)


def smart_replace(document: str, start: int, end: int, new_content: str) -> str:
    """Splice *new_content* into [start, end), indenting continuation lines.

    Continuation lines receive the leading whitespace of the line the target
    starts on, unless the new content already begins with it.
    """
    before = document[:start]
    after = document[end:]
    current_line = before.split("\n")[-1]
    indent = current_line[: len(current_line) - len(current_line.lstrip())]
    if indent and not new_content.startswith(indent):
        lines = new_content.split("\n")
        new_content = "\n".join([lines[0]] + [indent + line for line in lines[1:]])
    return before + new_content + after
