"""Pydantic schemas for rv_revenue API responses.

This is the presentation boundary: minor units are exposed as-is next to
their display strings. Today and week keep cents; the month-to-date
metric row is shown in whole units, while the menu-bar title keeps cents for
both figures:

    "$12.00 • MTD $340.50"

Before the first successful refresh the title reflects the refresh status
("Set API Key", "Network Error", "Loading…") instead of zeros.
"""

from pydantic import BaseModel

from src.rv_common.cents import cents_to_display
from src.rv_revenue.domain.models import RefreshFailure, RevenueSnapshot

TITLE_LOADING = "Loading…"
TITLE_SET_API_KEY = "Set API Key"
TITLE_NETWORK_ERROR = "Network Error"

_MISSING_CREDENTIAL_CODE = 1001


def menu_title(snapshot: RevenueSnapshot, failure: RefreshFailure | None = None) -> str:
    """Status-bar text for the current snapshot and last refresh outcome."""
    if failure is not None and failure.code == _MISSING_CREDENTIAL_CODE:
        return TITLE_SET_API_KEY
    if failure is not None:
        return TITLE_NETWORK_ERROR
    if not snapshot.is_known:
        return TITLE_LOADING
    today = cents_to_display(snapshot.today_minor, snapshot.currency)
    mtd = cents_to_display(snapshot.month_to_date_minor, snapshot.currency)
    return f"{today} • MTD {mtd}"


class MetricOut(BaseModel):
    label: str
    amount_minor: int
    display: str


class RefreshFailureOut(BaseModel):
    code: int
    message: str
    failed_at: str

    @classmethod
    def from_domain(cls, f: RefreshFailure) -> "RefreshFailureOut":
        return cls(code=f.code, message=f.message, failed_at=f.failed_at.isoformat())


class RevenueSnapshotOut(BaseModel):
    currency: str
    today: MetricOut
    week: MetricOut
    month_to_date: MetricOut
    refreshed_at: str | None
    menu_title: str
    refreshing: bool = False
    last_failure: RefreshFailureOut | None = None

    @classmethod
    def from_domain(
        cls,
        s: RevenueSnapshot,
        failure: RefreshFailure | None = None,
        refreshing: bool = False,
    ) -> "RevenueSnapshotOut":
        cur = s.currency
        return cls(
            currency=cur,
            today=MetricOut(
                label="Today",
                amount_minor=s.today_minor,
                display=cents_to_display(s.today_minor, cur),
            ),
            week=MetricOut(
                label="This Week",
                amount_minor=s.week_minor,
                display=cents_to_display(s.week_minor, cur),
            ),
            month_to_date=MetricOut(
                label="This Month (MTD)",
                amount_minor=s.month_to_date_minor,
                display=cents_to_display(s.month_to_date_minor, cur, fraction=False),
            ),
            refreshed_at=s.refreshed_at.isoformat() if s.refreshed_at else None,
            menu_title=menu_title(s, failure),
            refreshing=refreshing,
            last_failure=RefreshFailureOut.from_domain(failure) if failure else None,
        )
