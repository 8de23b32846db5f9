"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Credential
  2xxx: Upstream (payment processor)
  3xxx: Refresh lifecycle
  9xxx: System

Every failure of a refresh attempt is a RefreshError. None of them is retried
by the core; retry policy belongs to whoever triggers the refresh.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


class RefreshError(AppError):
    """A refresh attempt failed; the committed snapshot was left untouched."""


# --- 1xxx: Credential ---

class MissingCredentialError(RefreshError):
    def __init__(self) -> None:
        super().__init__(1001, "No API key configured", 409)


class InvalidCredentialError(AppError):
    def __init__(self, detail: str = "API key must not be empty") -> None:
        super().__init__(1002, detail, 422)


# --- 2xxx: Upstream ---

class AuthError(RefreshError):
    """Payment processor rejected the credential. Re-prompt, don't retry."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(2001, f"API key rejected by payment processor (HTTP {status_code})", 401)


class NetworkError(RefreshError):
    def __init__(self, detail: str) -> None:
        super().__init__(2002, f"Network error: {detail}", 502)


class DecodeError(RefreshError):
    def __init__(self, detail: str) -> None:
        super().__init__(2003, f"Malformed response: {detail}", 502)


# --- 3xxx: Refresh lifecycle ---

class RefreshInProgressError(RefreshError):
    def __init__(self) -> None:
        super().__init__(3001, "A refresh is already in progress", 409)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
