"""Token budget approximation and per-model ceilings."""
import math

from editcore.schemas import SizeValidation

CHARS_PER_TOKEN = 4

# Ceilings leave room for the system prompt and the response.
TOKEN_LIMITS: dict[str, int] = {
    "gpt-4o-mini": 100_000,
    "gpt-4": 6_000,
    "gpt-3.5-turbo": 14_000,
}
CHAR_LIMITS: dict[str, int] = {model: tokens * CHARS_PER_TOKEN for model, tokens in TOKEN_LIMITS.items()}

DEFAULT_MODEL = "gpt-4o-mini"


def estimate_token_count(text: str, chars_per_token: int = CHARS_PER_TOKEN) -> int:
    """Fixed-ratio approximation, not a tokenizer: ceil(len / chars_per_token)."""
    return math.ceil(len(text) / chars_per_token)


def token_limit(model: str) -> int:
    try:
        return TOKEN_LIMITS[model]
    except KeyError:
        raise ValueError(f"Unknown model {model!r}; known: {sorted(TOKEN_LIMITS)}") from None


def char_limit(model: str) -> int:
    token_limit(model)
    return CHAR_LIMITS[model]


def content_char_budget(
    model: str,
    overhead_tokens: int = 0,
    chars_per_token: int = CHARS_PER_TOKEN,
) -> int:
    """Characters left for document content after the system prompt overhead."""
    return max(0, char_limit(model) - overhead_tokens * chars_per_token)


def validate_content_size(
    content: str,
    model: str = DEFAULT_MODEL,
    chars_per_token: int = CHARS_PER_TOKEN,
) -> SizeValidation:
    estimated = estimate_token_count(content, chars_per_token)
    max_tokens = token_limit(model)
    valid = estimated <= max_tokens
    return SizeValidation(
        valid=valid,
        estimated_tokens=estimated,
        max_tokens=max_tokens,
        suggestion=None
        if valid
        else (
            f"Content is too large ({estimated} tokens). "
            "Consider splitting into smaller sections or using content chunking."
        ),
    )
