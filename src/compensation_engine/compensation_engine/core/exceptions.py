from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request parameters are invalid (bad month, day, year...)."""


class CollaboratorError(DomainError):
    """Raised when settings, holidays or stored records cannot be loaded.

    The message is meant to be shown to the user as-is; the underlying
    exception is kept on ``cause``.
    """

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
