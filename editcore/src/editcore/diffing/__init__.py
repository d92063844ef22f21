from editcore.diffing.line_diff import (
    ELLIPSIS,
    diff_stats,
    format_diff_for_display,
    generate_contextual_diff,
    generate_diff,
)

__all__ = [
    "ELLIPSIS",
    "diff_stats",
    "format_diff_for_display",
    "generate_contextual_diff",
    "generate_diff",
]
