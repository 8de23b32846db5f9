"""Domain models for rv_revenue — frozen dataclasses, no I/O."""

from dataclasses import dataclass
from datetime import datetime

from src.rv_common.datetime_utils import to_epoch_seconds
from src.rv_common.enums import RevenueWindow, TransactionStatus


@dataclass(frozen=True)
class Transaction:
    """One charge as listed by the payment processor.

    id is opaque and only used as a pagination cursor. currency and
    created_at are informational; the engine assumes a single currency.
    """

    id: str
    amount_minor: int
    currency: str
    status: str
    refunded: bool
    created_at: datetime

    def is_eligible(self) -> bool:
        """Counted toward revenue iff succeeded and not refunded."""
        return self.status == TransactionStatus.SUCCEEDED.value and self.refunded is False


@dataclass(frozen=True)
class DateWindow:
    """Closed time range [start, end]; both ends inclusive."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"window start {self.start} is after end {self.end}")

    @property
    def start_epoch(self) -> int:
        return to_epoch_seconds(self.start)

    @property
    def end_epoch(self) -> int:
        return to_epoch_seconds(self.end)


@dataclass(frozen=True)
class Page:
    """One response of the listing endpoint, already normalised.

    An empty page never reports has_more, whatever the server said.
    """

    items: tuple[Transaction, ...]
    has_more: bool

    @property
    def next_cursor(self) -> str | None:
        return self.items[-1].id if self.items else None


@dataclass(frozen=True)
class RevenueSnapshot:
    """Committed result of a refresh. Replaced wholesale, never mutated.

    refreshed_at is None for the initial all-zero snapshot, i.e. totals are
    still unknown.
    """

    today_minor: int = 0
    week_minor: int = 0
    month_to_date_minor: int = 0
    currency: str = "USD"
    refreshed_at: datetime | None = None

    @property
    def is_known(self) -> bool:
        return self.refreshed_at is not None

    def total_for(self, window: RevenueWindow) -> int:
        return {
            RevenueWindow.TODAY: self.today_minor,
            RevenueWindow.WEEK: self.week_minor,
            RevenueWindow.MONTH_TO_DATE: self.month_to_date_minor,
        }[window]


@dataclass(frozen=True)
class RefreshFailure:
    """Last failed refresh, kept for UI feedback."""

    code: int
    message: str
    failed_at: datetime
