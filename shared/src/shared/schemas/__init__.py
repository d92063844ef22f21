"""Common DTOs and schemas."""
from shared.schemas.operation_context import OperationContext, ensure_context

__all__ = ["OperationContext", "ensure_context"]
