# app/domain/errors.py
from __future__ import annotations


class LeadOpsError(Exception):
    pass


class ValidationError(LeadOpsError, ValueError):
    """Bad input, detected before any I/O."""


class SourceError(LeadOpsError):
    """Both unsent-lead procedures failed."""


class NoCredentialError(LeadOpsError):
    pass


class PerLeadError(LeadOpsError):
    """One lead's processor call failed. Counted, never fatal to a batch."""

    def __init__(self, lead_id: str | None, message: str) -> None:
        super().__init__(message)
        self.lead_id = lead_id
        self.message = message


class RowIngestError(LeadOpsError):
    """One CSV row could not be stored. Counted, never fatal to an upload."""

    def __init__(self, row_number: int, message: str) -> None:
        super().__init__(message)
        self.row_number = row_number
        self.message = message
