"""Unit tests for CredentialGateway and the credential store backends."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.rv_common.errors import InvalidCredentialError
from src.rv_credentials.application import service as credential_service
from src.rv_credentials.application.gateway import CredentialGateway
from src.rv_credentials.infrastructure.memory_store import MemoryCredentialStore
from src.rv_credentials.infrastructure.redis_store import RedisCredentialStore

KEY = "com.example.test.apikey"


@pytest.fixture
def gateway() -> CredentialGateway:
    return CredentialGateway(MemoryCredentialStore(), key=KEY)


class TestGateway:
    @pytest.mark.asyncio
    async def test_absent_by_default(self, gateway: CredentialGateway) -> None:
        assert await gateway.get() is None
        assert await gateway.is_configured() is False

    @pytest.mark.asyncio
    async def test_set_then_get(self, gateway: CredentialGateway) -> None:
        await gateway.set("sk_test_abc")
        assert await gateway.get() == "sk_test_abc"
        assert await gateway.is_configured() is True

    @pytest.mark.asyncio
    async def test_set_strips_whitespace(self, gateway: CredentialGateway) -> None:
        await gateway.set("  sk_test_abc\n")
        assert await gateway.get() == "sk_test_abc"

    @pytest.mark.asyncio
    async def test_set_replaces_previous(self, gateway: CredentialGateway) -> None:
        await gateway.set("sk_old")
        await gateway.set("sk_new")
        assert await gateway.get() == "sk_new"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["", "   "])
    async def test_set_rejects_empty(self, gateway: CredentialGateway, value: str) -> None:
        with pytest.raises(InvalidCredentialError):
            await gateway.set(value)
        assert await gateway.get() is None

    @pytest.mark.asyncio
    async def test_delete(self, gateway: CredentialGateway) -> None:
        await gateway.set("sk_test_abc")
        await gateway.delete()
        assert await gateway.get() is None

    @pytest.mark.asyncio
    async def test_delete_when_absent_is_noop(self, gateway: CredentialGateway) -> None:
        await gateway.delete()
        assert await gateway.get() is None

    @pytest.mark.asyncio
    async def test_stored_blank_value_reads_as_absent(self) -> None:
        gw = CredentialGateway(MemoryCredentialStore({KEY: ""}), key=KEY)
        assert await gw.get() is None

    @pytest.mark.asyncio
    async def test_secret_never_logged(self, gateway: CredentialGateway, caplog) -> None:
        caplog.set_level("DEBUG")
        await gateway.set("sk_live_supersecret")
        await gateway.get()
        await gateway.delete()
        assert "sk_live_supersecret" not in caplog.text


class TestRedisStore:
    @pytest.fixture
    def redis(self) -> MagicMock:
        r = MagicMock()
        r.get = AsyncMock(return_value="sk_live_1")
        r.set = AsyncMock()
        r.delete = AsyncMock()
        return r

    @pytest.mark.asyncio
    async def test_get_uses_prefixed_key(self, redis: MagicMock) -> None:
        store = RedisCredentialStore(redis_factory=AsyncMock(return_value=redis))
        assert await store.get(KEY) == "sk_live_1"
        redis.get.assert_awaited_once_with(f"credential:{KEY}")

    @pytest.mark.asyncio
    async def test_get_missing(self, redis: MagicMock) -> None:
        redis.get = AsyncMock(return_value=None)
        store = RedisCredentialStore(redis_factory=AsyncMock(return_value=redis))
        assert await store.get(KEY) is None

    @pytest.mark.asyncio
    async def test_set_and_delete(self, redis: MagicMock) -> None:
        store = RedisCredentialStore(redis_factory=AsyncMock(return_value=redis))
        await store.set(KEY, "sk_live_2")
        await store.delete(KEY)
        redis.set.assert_awaited_once_with(f"credential:{KEY}", "sk_live_2")
        redis.delete.assert_awaited_once_with(f"credential:{KEY}")


class TestBuildStore:
    def test_memory_backend(self) -> None:
        assert isinstance(credential_service.build_store("memory"), MemoryCredentialStore)

    def test_redis_backend(self) -> None:
        assert isinstance(credential_service.build_store("REDIS"), RedisCredentialStore)

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError):
            credential_service.build_store("keychain")

    @pytest.mark.asyncio
    async def test_memory_backend_seeded_from_settings(self) -> None:
        with patch.object(credential_service.settings, "STRIPE_API_KEY", "sk_env_seed"):
            store = credential_service.build_store("memory")
        assert await store.get(credential_service.settings.CREDENTIAL_KEY) == "sk_env_seed"
