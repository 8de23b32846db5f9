"""Global enums.

TransactionStatus values must match the payment processor's charge statuses.
"""

from enum import Enum


class TransactionStatus(str, Enum):
    SUCCEEDED = "succeeded"
    PENDING = "pending"
    FAILED = "failed"


class RevenueWindow(str, Enum):
    """Rolling windows summed on every refresh, all ending at 'now'."""
    TODAY = "TODAY"
    WEEK = "WEEK"
    MONTH_TO_DATE = "MONTH_TO_DATE"


class RefreshState(str, Enum):
    IDLE = "IDLE"
    CREDENTIAL_CHECKED = "CREDENTIAL_CHECKED"
    FETCHING = "FETCHING"


class CredentialBackend(str, Enum):
    MEMORY = "memory"
    REDIS = "redis"
