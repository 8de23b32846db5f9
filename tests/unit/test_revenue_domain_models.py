"""Tests for rv_revenue.domain.models."""
from dataclasses import FrozenInstanceError
from datetime import UTC, datetime

import pytest

from src.rv_common.enums import RevenueWindow
from src.rv_revenue.domain.models import DateWindow, RevenueSnapshot
from tests.fakes import make_page, make_tx


class TestTransactionEligibility:
    @pytest.mark.parametrize(
        ("status", "refunded", "expected"),
        [
            ("succeeded", False, True),
            ("succeeded", True, False),
            ("pending", False, False),
            ("failed", False, False),
            ("disputed", False, False),
        ],
    )
    def test_rule(self, status: str, refunded: bool, expected: bool) -> None:
        assert make_tx("ch", 100, status, refunded).is_eligible() is expected


class TestDateWindow:
    def test_start_after_end_rejected(self) -> None:
        with pytest.raises(ValueError):
            DateWindow(
                start=datetime(2026, 10, 22, tzinfo=UTC),
                end=datetime(2026, 10, 21, tzinfo=UTC),
            )

    def test_zero_length_allowed(self) -> None:
        t = datetime(2026, 10, 1, tzinfo=UTC)
        w = DateWindow(start=t, end=t)
        assert w.start_epoch == w.end_epoch


class TestPage:
    def test_next_cursor_is_last_id(self) -> None:
        assert make_page(make_tx("a"), make_tx("b")).next_cursor == "b"

    def test_empty_page_has_no_cursor(self) -> None:
        assert make_page().next_cursor is None


class TestRevenueSnapshot:
    def test_initial_is_zero_and_unknown(self) -> None:
        s = RevenueSnapshot()
        assert (s.today_minor, s.week_minor, s.month_to_date_minor) == (0, 0, 0)
        assert s.is_known is False

    def test_immutable(self) -> None:
        s = RevenueSnapshot()
        with pytest.raises(FrozenInstanceError):
            s.today_minor = 5  # type: ignore[misc]

    def test_total_for(self) -> None:
        s = RevenueSnapshot(today_minor=1, week_minor=2, month_to_date_minor=3)
        assert s.total_for(RevenueWindow.TODAY) == 1
        assert s.total_for(RevenueWindow.WEEK) == 2
        assert s.total_for(RevenueWindow.MONTH_TO_DATE) == 3
