"""Shared test fixtures.

The API fixtures swap the process-wide orchestrator and credential gateway
for in-memory instances driven by a ScriptedFetcher, so no test touches the
network or Redis.
"""

from datetime import UTC

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.rv_credentials.application.gateway import CredentialGateway
from src.rv_credentials.application.service import get_credential_gateway
from src.rv_credentials.infrastructure.memory_store import MemoryCredentialStore
from src.rv_revenue.application.orchestrator import RevenueOrchestrator
from src.rv_revenue.application.service import get_orchestrator
from src.rv_revenue.domain.aggregator import WindowAggregator
from tests.fakes import (
    FIXED_NOW,
    MONTH_START,
    TODAY_START,
    WEEK_START,
    ScriptedFetcher,
    make_page,
    make_tx,
)


@pytest.fixture
def gateway() -> CredentialGateway:
    return CredentialGateway(MemoryCredentialStore(), key="test.apikey")


@pytest.fixture
def fetcher() -> ScriptedFetcher:
    return ScriptedFetcher(
        pages={
            TODAY_START: [make_page(make_tx("t1", 1200))],
            WEEK_START: [
                make_page(make_tx("w1", 3000), has_more=True),
                make_page(make_tx("w2", 1000, refunded=True), make_tx("w3", 500)),
            ],
            MONTH_START: [make_page(make_tx("m1", 34050), make_tx("m2", 99, "failed"))],
        }
    )


@pytest.fixture
def orchestrator(gateway: CredentialGateway, fetcher: ScriptedFetcher) -> RevenueOrchestrator:
    return RevenueOrchestrator(
        credentials=gateway,
        aggregator=WindowAggregator(fetcher),
        tz=UTC,
        week_start=0,
        currency="USD",
        clock=lambda: FIXED_NOW,
    )


@pytest_asyncio.fixture
async def client(gateway: CredentialGateway, orchestrator: RevenueOrchestrator) -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    app.dependency_overrides[get_credential_gateway] = lambda: gateway
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
