# src/rv_credentials/domain/store.py
"""CredentialStore Protocol — dependency inversion for testability.

A store holds at most one secret under a fixed key. Where it lives
(process memory, Redis, an OS keychain) is the backend's business.
"""

from typing import Protocol


class CredentialStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...
