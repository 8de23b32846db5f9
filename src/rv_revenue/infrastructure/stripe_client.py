"""StripePageFetcher — one GET /v1/charges request per call.

Request:
    GET {base}/v1/charges?created[gte]=<start>&created[lte]=<end>&limit=100
        [&starting_after=<cursor>]
    Authorization: Bearer <credential>

Error mapping:
    transport failure / timeout   -> NetworkError
    bad Content-Encoding body     -> DecodeError
    HTTP 401 / 403                -> AuthError
    any other non-2xx status      -> NetworkError
    invalid JSON / wrong shape    -> DecodeError

The credential is only ever placed in the Authorization header; it is never
logged and never part of an error message.
"""

import logging

import httpx
from pydantic import ValidationError

from config.settings import settings
from src.rv_common.errors import AuthError, DecodeError, NetworkError
from src.rv_revenue.domain.models import DateWindow, Page
from src.rv_revenue.infrastructure.schemas import ChargeListEnvelope

logger = logging.getLogger(__name__)

CHARGES_PATH = "/v1/charges"
_AUTH_STATUSES = frozenset({401, 403})


def build_query(window: DateWindow, cursor: str | None, page_size: int) -> dict[str, str | int]:
    params: dict[str, str | int] = {
        "created[gte]": window.start_epoch,
        "created[lte]": window.end_epoch,
        "limit": page_size,
    }
    if cursor is not None:
        params["starting_after"] = cursor
    return params


def create_http_client(
    base_url: str = settings.STRIPE_API_BASE,
    timeout: float = settings.HTTP_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Shared client; tests pass an httpx.MockTransport."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        transport=transport,
    )


class StripePageFetcher:
    def __init__(
        self, client: httpx.AsyncClient, page_size: int = settings.PAGE_SIZE
    ) -> None:
        self._client = client
        self._page_size = page_size

    async def fetch(self, window: DateWindow, cursor: str | None, credential: str) -> Page:
        params = build_query(window, cursor, self._page_size)
        try:
            response = await self._client.get(
                CHARGES_PATH,
                params=params,
                headers={"Authorization": f"Bearer {credential}"},
            )
        except httpx.TimeoutException as exc:
            raise NetworkError(f"timed out listing charges ({type(exc).__name__})") from exc
        except httpx.DecodingError as exc:
            raise DecodeError(f"undecodable response body ({type(exc).__name__})") from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"transport failure listing charges ({type(exc).__name__})") from exc

        if response.status_code in _AUTH_STATUSES:
            raise AuthError(response.status_code)
        if response.is_error:
            raise NetworkError(f"charge listing returned HTTP {response.status_code}")

        try:
            envelope = ChargeListEnvelope.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"{exc.error_count()} invalid field(s) in charge list") from exc

        page = envelope.to_page()
        logger.debug(
            "Fetched %d charges (cursor=%s, has_more=%s)",
            len(page.items),
            cursor,
            page.has_more,
        )
        return page
