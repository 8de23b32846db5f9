# src/rv_credentials/application/service.py
from config.settings import settings
from src.rv_common.enums import CredentialBackend
from src.rv_credentials.application.gateway import CredentialGateway
from src.rv_credentials.domain.store import CredentialStore
from src.rv_credentials.infrastructure.memory_store import MemoryCredentialStore
from src.rv_credentials.infrastructure.redis_store import RedisCredentialStore

_gateway: CredentialGateway | None = None


def build_store(backend: str = settings.CREDENTIAL_BACKEND) -> CredentialStore:
    """Instantiate the configured backend. Unknown names raise ValueError."""
    kind = CredentialBackend(backend.lower())
    if kind is CredentialBackend.REDIS:
        return RedisCredentialStore()
    initial = {settings.CREDENTIAL_KEY: settings.STRIPE_API_KEY} if settings.STRIPE_API_KEY else None
    return MemoryCredentialStore(initial)


def get_credential_gateway() -> CredentialGateway:
    global _gateway  # noqa: PLW0603
    if _gateway is None:
        _gateway = CredentialGateway(build_store())
    return _gateway
