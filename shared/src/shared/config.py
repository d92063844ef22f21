"""Settings base shared by the edit core and its hosts."""
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """Reads ``.env`` plus the environment; unknown keys are ignored."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_json: bool = True
    log_level: str = "info"  # debug | info | warning | error

    def logging_options(self) -> dict[str, Any]:
        """Keyword arguments for ``shared.logging.configure_logging``."""
        return {"json_logs": self.log_json, "level": self.log_level}
