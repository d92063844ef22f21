from editcore.selection.decoration import (
    clean_selection,
    decorate_lines,
    is_raw_text_document,
    is_windowed,
    strip_line_numbers,
)
from editcore.selection.offsets import index_from_utf16, utf16_offset
from editcore.selection.reconciler import (
    DEFAULT_STRATEGIES,
    Offsets,
    exact_match,
    line_anchored,
    reconcile,
    reconcile_selection,
    revalidate_selection,
    word_anchored,
)
from editcore.selection.viewport import WindowedView, WindowMetrics

__all__ = [
    "DEFAULT_STRATEGIES",
    "Offsets",
    "WindowMetrics",
    "WindowedView",
    "clean_selection",
    "decorate_lines",
    "exact_match",
    "index_from_utf16",
    "is_raw_text_document",
    "is_windowed",
    "line_anchored",
    "reconcile",
    "reconcile_selection",
    "revalidate_selection",
    "strip_line_numbers",
    "utf16_offset",
    "word_anchored",
]
