# src/rv_revenue/domain/fetcher.py
"""PageFetcher Protocol — the aggregator depends on this, not on HTTP.

Unit tests inject a scripted fake that conforms to this Protocol.
Infrastructure provides the Stripe implementation.
"""

from typing import Protocol

from src.rv_revenue.domain.models import DateWindow, Page


class PageFetcherProtocol(Protocol):
    async def fetch(
        self,
        window: DateWindow,
        cursor: str | None,
        credential: str,
    ) -> Page: ...
