# src/rv_revenue/application/service.py
import httpx

from config.settings import settings
from src.rv_common.datetime_utils import get_zone
from src.rv_credentials.application.service import get_credential_gateway
from src.rv_revenue.application.orchestrator import RevenueOrchestrator
from src.rv_revenue.domain.aggregator import WindowAggregator
from src.rv_revenue.infrastructure.stripe_client import StripePageFetcher, create_http_client

_http_client: httpx.AsyncClient | None = None
_orchestrator: RevenueOrchestrator | None = None


def get_http_client() -> httpx.AsyncClient:
    global _http_client  # noqa: PLW0603
    if _http_client is None:
        _http_client = create_http_client()
    return _http_client


async def close_http_client() -> None:
    global _http_client  # noqa: PLW0603
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None


def get_orchestrator() -> RevenueOrchestrator:
    global _orchestrator  # noqa: PLW0603
    if _orchestrator is None:
        fetcher = StripePageFetcher(get_http_client(), page_size=settings.PAGE_SIZE)
        _orchestrator = RevenueOrchestrator(
            credentials=get_credential_gateway(),
            aggregator=WindowAggregator(fetcher, max_pages=settings.MAX_PAGES_PER_WINDOW),
            tz=get_zone(settings.TIMEZONE),
            week_start=settings.WEEK_START,
            currency=settings.CURRENCY,
        )
    return _orchestrator
