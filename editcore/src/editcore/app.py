"""Process-level wiring for hosts embedding the edit core.

Host-only: the cached settings below serve an application entrypoint. Core
operations never read them; they take settings and an OperationContext as
arguments.
"""
from shared.logging import configure_logging

from editcore.config import EditCoreSettings

_settings: EditCoreSettings | None = None


def get_settings() -> EditCoreSettings:
    global _settings
    if _settings is None:
        _settings = EditCoreSettings()
    return _settings


def bootstrap(settings: EditCoreSettings | None = None) -> EditCoreSettings:
    """Load settings once and configure logging from them."""
    global _settings
    if settings is not None:
        _settings = settings
    settings = get_settings()
    configure_logging(**settings.logging_options())
    return settings
