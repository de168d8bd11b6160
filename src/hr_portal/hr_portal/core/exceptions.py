from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a login attempt cannot produce a session."""


class InvalidCredentials(AuthenticationError):
    """Raised when no account matches the given username/password."""


class AuthServiceUnavailable(AuthenticationError):
    """Raised when the account list could not be fetched during login."""


class AuthorizationError(DomainError):
    """Raised when there is no active session or the role is not allowed."""


class PartialCascadeFailure(DomainError):
    """The account was deleted but some dependent records were not.

    ``failures`` holds ``(collection, record_id, error)`` tuples; the same
    entries stay queued in the manager's cascade log until retried.
    """

    def __init__(self, account_id: Any, failures: Sequence[Tuple[Any, Any, Exception]]):
        self.account_id = account_id
        self.failures = list(failures)
        super().__init__(
            f"Account {account_id} was deleted but {len(self.failures)} related record(s) could not be removed"
        )


class StoreError(Exception):
    """Base exception for remote store failures."""


class TransportError(StoreError):
    """Network failure, timeout, non-2xx status or malformed response body."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(StoreError):
    """The record id does not exist in the collection."""

    def __init__(self, collection: Any, record_id: Any):
        self.collection = collection
        self.record_id = record_id
        name = getattr(collection, "value", collection)
        super().__init__(f"{name} record {record_id} not found")
