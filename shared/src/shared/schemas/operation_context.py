"""Per-operation context carrying trace identifiers and a bound logger."""
import uuid
from typing import Any

from pydantic import BaseModel, Field

from shared.logging import get_logger


def _short_id() -> str:
    return uuid.uuid4().hex[:9]


class OperationContext(BaseModel):
    """Request and trace identifiers for one editing operation.

    Passed explicitly into core operations instead of relying on a process-wide
    logger, so concurrent sessions never share logging state.
    """

    request_id: str = Field(default_factory=_short_id)
    trace_id: str = ""

    def logger(self, component: str) -> Any:
        return get_logger(
            component,
            request_id=self.request_id,
            trace_id=self.trace_id or self.request_id,
        )


def ensure_context(ctx: OperationContext | None) -> OperationContext:
    """Return *ctx*, or a fresh context when the caller passed none."""
    return ctx if ctx is not None else OperationContext()
