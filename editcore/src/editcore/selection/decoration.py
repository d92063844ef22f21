"""Line-number decoration added by the windowed raw-text view, and its removal."""
import re

_LINE_NUMBER_RE = re.compile(r"^\s*\d+\s*")

RAW_TEXT_EXTENSIONS = (".mmd", ".tex", ".latex")
_LATEX_PATTERNS = [
    re.compile(r"\\title\s*\{"),
    re.compile(r"\\section\s*\{"),
    re.compile(r"\\chapter\s*\{"),
    re.compile(r"\\begin\s*\{"),
    re.compile(r"\\end\s*\{"),
    re.compile(r"\\documentclass"),
    re.compile(r"\\usepackage"),
]


def is_raw_text_document(content: str, file_name: str | None = None) -> bool:
    """Raw (line-numbered) view for LaTeX-like files; rendered Markdown otherwise."""
    if file_name and file_name.lower().endswith(RAW_TEXT_EXTENSIONS):
        return True
    return any(p.search(content) for p in _LATEX_PATTERNS)


def strip_line_numbers(text: str) -> str:
    """Drop a leading digits+whitespace prefix from every line, then trim the whole."""
    return "\n".join(_LINE_NUMBER_RE.sub("", line, count=1) for line in text.split("\n")).strip()


def clean_selection(text: str, decorated: bool) -> str:
    """Undo view decoration; undecorated (Markdown) selections pass through unchanged."""
    if not decorated:
        return text
    return strip_line_numbers(text)


def decorate_lines(lines: list[str], first_line_number: int = 1) -> str:
    """Prefix each line with its right-aligned line number, as the raw view shows it."""
    if not lines:
        return ""
    width = len(str(first_line_number + len(lines) - 1))
    return "\n".join(
        f"{first_line_number + i:>{width}} {line}" for i, line in enumerate(lines)
    )


def is_windowed(content: str, file_name: str | None = None, min_chars: int = 500) -> bool:
    """Large raw-text documents are shown through the line window."""
    return is_raw_text_document(content, file_name) and len(content) > min_chars
