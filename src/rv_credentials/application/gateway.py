"""CredentialGateway — the single secret API key, as seen by the core.

The gateway never logs, caches, or returns the secret anywhere except to its
direct caller. Whitespace-only values are treated as absent so the
orchestrator never sends an empty bearer token.
"""

import logging

from config.settings import settings
from src.rv_common.errors import InvalidCredentialError
from src.rv_credentials.domain.store import CredentialStore

logger = logging.getLogger(__name__)


class CredentialGateway:
    def __init__(self, store: CredentialStore, key: str = settings.CREDENTIAL_KEY) -> None:
        self._store = store
        self._key = key

    async def get(self) -> str | None:
        value = await self._store.get(self._key)
        if value is None or not value.strip():
            return None
        return value.strip()

    async def set(self, value: str) -> None:
        if not value or not value.strip():
            raise InvalidCredentialError()
        await self._store.set(self._key, value.strip())
        logger.info("API key stored")

    async def delete(self) -> None:
        await self._store.delete(self._key)
        logger.info("API key deleted")

    async def is_configured(self) -> bool:
        return await self.get() is not None
