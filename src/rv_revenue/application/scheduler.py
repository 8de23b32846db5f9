"""RefreshScheduler — periodic trigger living outside the core.

Calls orchestrator.refresh() once immediately and then every interval
seconds. Failures are logged and the loop keeps going; the next tick is the
only retry. A tick that finds no API key is skipped quietly, and a tick that
lands while a manual refresh is running is skipped too.
"""

import asyncio
import logging

from src.rv_common.errors import MissingCredentialError, RefreshError, RefreshInProgressError
from src.rv_revenue.application.orchestrator import RevenueOrchestrator

logger = logging.getLogger(__name__)


class RefreshScheduler:
    def __init__(self, orchestrator: RevenueOrchestrator, interval_seconds: float) -> None:
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        self._orchestrator = orchestrator
        self._interval = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="revenue-scheduler")
        logger.info("Refresh scheduler started (every %ss)", self._interval)

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Refresh scheduler stopped")

    async def tick(self) -> bool:
        """One scheduled refresh. Returns True if a snapshot was committed."""
        try:
            await self._orchestrator.refresh()
        except MissingCredentialError:
            logger.info("Scheduled refresh skipped: no API key configured")
            return False
        except RefreshInProgressError:
            logger.debug("Scheduled refresh skipped: refresh already in progress")
            return False
        except RefreshError as exc:
            logger.warning("Scheduled refresh failed [%d]: %s", exc.code, exc.message)
            return False
        except Exception:
            logger.exception("Scheduled refresh crashed")
            return False
        return True

    async def _run(self) -> None:
        while True:
            await self.tick()
            await asyncio.sleep(self._interval)
