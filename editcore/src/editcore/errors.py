"""Edit core exceptions."""


class EditCoreError(Exception):
    """Base error for the edit core."""

    pass


class StaleSelectionError(EditCoreError):
    """Raised when a selection no longer matches the current document."""

    pass


class NoPendingProposalError(EditCoreError):
    """Raised when accepting or discarding without a pending proposal."""

    pass
