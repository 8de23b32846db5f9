"""RevenueOrchestrator — one refresh = three windows, all or nothing.

Refresh cycle:
    IDLE -> CREDENTIAL_CHECKED -> FETCHING (3 concurrent tasks) -> IDLE

Rules:
  - No credential: fail with MissingCredentialError before any request.
  - Windows are derived from the clock on every call, never cached.
  - The three aggregations run as separate asyncio tasks that share nothing
    but the read-only credential. The first failure cancels the tasks still
    running and becomes the refresh failure.
  - The snapshot is replaced by a single assignment, and only after all
    three windows succeeded. On failure the previous snapshot stays.
  - Only one refresh at a time: a call made while another is in flight is
    rejected with RefreshInProgressError instead of racing it to commit.
  - No internal retries.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, tzinfo

from src.rv_common.datetime_utils import utc_now
from src.rv_common.enums import RefreshState, RevenueWindow
from src.rv_common.errors import (
    AppError,
    InternalError,
    MissingCredentialError,
    RefreshInProgressError,
)
from src.rv_credentials.application.gateway import CredentialGateway
from src.rv_revenue.domain.aggregator import WindowAggregator
from src.rv_revenue.domain.models import DateWindow, RefreshFailure, RevenueSnapshot
from src.rv_revenue.domain.windows import compute_windows

logger = logging.getLogger(__name__)


class RevenueOrchestrator:
    def __init__(
        self,
        credentials: CredentialGateway,
        aggregator: WindowAggregator,
        tz: tzinfo,
        week_start: int = 0,
        currency: str = "USD",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._credentials = credentials
        self._aggregator = aggregator
        self._tz = tz
        self._week_start = week_start
        self._currency = currency
        self._clock = clock
        self._snapshot = RevenueSnapshot(currency=currency)
        self._state = RefreshState.IDLE
        self._last_failure: RefreshFailure | None = None
        self._lock = asyncio.Lock()

    @property
    def snapshot(self) -> RevenueSnapshot:
        return self._snapshot

    @property
    def state(self) -> RefreshState:
        return self._state

    @property
    def last_failure(self) -> RefreshFailure | None:
        return self._last_failure

    @property
    def is_refreshing(self) -> bool:
        return self._lock.locked()

    async def refresh(self) -> RevenueSnapshot:
        """Run one refresh cycle and return the newly committed snapshot.

        Raises a RefreshError subclass on failure, or InternalError when
        something unexpected breaks. The committed snapshot is unchanged then.
        """
        if self._lock.locked():
            raise RefreshInProgressError()

        async with self._lock:
            try:
                snapshot = await self._run_cycle()
            except AppError as exc:
                self._record_failure(exc.code, exc.message)
                raise
            except Exception as exc:
                logger.exception("Refresh crashed")
                internal = InternalError(str(exc) or type(exc).__name__)
                self._record_failure(internal.code, internal.message)
                raise internal from exc
            finally:
                self._state = RefreshState.IDLE

            self._snapshot = snapshot
            self._last_failure = None
            logger.info(
                "Revenue committed: today=%d week=%d mtd=%d %s",
                snapshot.today_minor,
                snapshot.week_minor,
                snapshot.month_to_date_minor,
                snapshot.currency,
            )
            return snapshot

    async def _run_cycle(self) -> RevenueSnapshot:
        credential = await self._credentials.get()
        if credential is None:
            raise MissingCredentialError()
        self._state = RefreshState.CREDENTIAL_CHECKED

        now = self._clock()
        windows = compute_windows(now, self._tz, self._week_start)

        self._state = RefreshState.FETCHING
        totals = await self._aggregate_all(windows, credential)

        return RevenueSnapshot(
            today_minor=totals[RevenueWindow.TODAY],
            week_minor=totals[RevenueWindow.WEEK],
            month_to_date_minor=totals[RevenueWindow.MONTH_TO_DATE],
            currency=self._currency,
            refreshed_at=now,
        )

    async def _aggregate_all(
        self, windows: dict[RevenueWindow, DateWindow], credential: str
    ) -> dict[RevenueWindow, int]:
        failures: list[tuple[RevenueWindow, BaseException]] = []

        def on_done(name: RevenueWindow, task: asyncio.Task) -> None:
            if not task.cancelled() and task.exception() is not None:
                failures.append((name, task.exception()))

        tasks: dict[RevenueWindow, asyncio.Task] = {}
        for name, window in windows.items():
            task = asyncio.create_task(
                self._aggregator.aggregate(window, credential),
                name=f"revenue-{name.value.lower()}",
            )
            task.add_done_callback(lambda t, n=name: on_done(n, t))
            tasks[name] = task

        try:
            await asyncio.wait(tasks.values(), return_when=asyncio.FIRST_EXCEPTION)
        finally:
            # Stop whatever is still running, whether a window failed or we were cancelled
            stragglers = [t for t in tasks.values() if not t.done()]
            for task in stragglers:
                task.cancel()
            if stragglers:
                await asyncio.gather(*stragglers, return_exceptions=True)

        # Done callbacks run in completion order, so failures[0] failed first
        if failures:
            name, exc = failures[0]
            logger.warning("Window %s failed: %s", name.value, exc)
            raise exc
        return {name: task.result() for name, task in tasks.items()}

    def _record_failure(self, code: int, message: str) -> None:
        self._last_failure = RefreshFailure(code=code, message=message, failed_at=utc_now())
        logger.warning("Refresh failed [%d]: %s", code, message)
