from editcore.editing.formatting import (
    FormatOptions,
    FormattingAnalysis,
    analyze_formatting,
    formatting_instructions,
    smart_replace,
    validate_format_preservation,
)
from editcore.editing.proposal import build_proposal, parse_model_reply, splice
from editcore.editing.session import EditSession
from editcore.editing.transforms import (
    FormatTransform,
    detect_format_transformation,
    transform_instructions,
)

__all__ = [
    "EditSession",
    "FormatOptions",
    "FormatTransform",
    "FormattingAnalysis",
    "analyze_formatting",
    "build_proposal",
    "detect_format_transformation",
    "formatting_instructions",
    "parse_model_reply",
    "smart_replace",
    "splice",
    "transform_instructions",
    "validate_format_preservation",
]
