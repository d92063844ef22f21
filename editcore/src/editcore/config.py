"""Edit core configuration."""
from pydantic_settings import SettingsConfigDict

from shared.config import BaseAppSettings


class EditCoreSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="EDITCORE_")

    chars_per_token: int = 4
    default_model: str = "gpt-4o-mini"
    system_prompt_overhead_tokens: int = 2000
    smart_context_min_chars: int = 2000
    ranker_header_bonus: int = 10
    ranker_min_term_length: int = 3
    diff_context_lines: int = 2
    view_window_size: int = 10
    view_scroll_step: int = 2
    windowed_min_chars: int = 500
