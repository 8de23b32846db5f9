"""WindowAggregator — exhaust every page of one window, then filter and sum.

Pagination is strictly sequential: each request's cursor is the id of the
last item of the previous page, so pages cannot be fetched in parallel.
Fetcher errors propagate unchanged; a window either completes or fails.
"""

import logging
from collections.abc import Iterable

from src.rv_common.errors import NetworkError
from src.rv_revenue.domain.fetcher import PageFetcherProtocol
from src.rv_revenue.domain.models import DateWindow, Transaction

logger = logging.getLogger(__name__)


def sum_eligible(transactions: Iterable[Transaction]) -> int:
    """Integer sum of amount_minor over succeeded, non-refunded transactions."""
    total = 0
    for tx in transactions:
        if tx.is_eligible():
            total += tx.amount_minor
    return total


class WindowAggregator:
    def __init__(
        self, fetcher: PageFetcherProtocol, max_pages: int | None = None
    ) -> None:
        if max_pages is not None and max_pages < 1:
            raise ValueError(f"max_pages must be positive, got {max_pages}")
        self._fetcher = fetcher
        self._max_pages = max_pages

    async def collect(self, window: DateWindow, credential: str) -> list[Transaction]:
        """Every transaction in the window, in the order the server returned them."""
        items: list[Transaction] = []
        cursor: str | None = None
        pages = 0
        while True:
            if self._max_pages is not None and pages >= self._max_pages:
                raise NetworkError(
                    f"pagination exceeded {self._max_pages} pages for window "
                    f"{window.start_epoch}-{window.end_epoch}"
                )
            page = await self._fetcher.fetch(window, cursor, credential)
            pages += 1
            items.extend(page.items)
            # An empty page ends the window even if has_more is still set
            if not page.has_more or not page.items:
                break
            cursor = page.next_cursor

        logger.debug(
            "Window %d-%d: %d transactions over %d pages",
            window.start_epoch,
            window.end_epoch,
            len(items),
            pages,
        )
        return items

    async def aggregate(self, window: DateWindow, credential: str) -> int:
        return sum_eligible(await self.collect(window, credential))
