"""Tests for bearer token extraction and identity lookup"""

import httpx
import pytest

from src.config.exception_config import AuthError, ConfigurationError, IdentityServiceError
from src.config.settings import SupabaseConfig
from src.services.identity import SupabaseIdentityResolver, extract_bearer_token

from tests.conftest import RecordingTransport, json_transport


class TestExtractBearerToken:
    def test_strips_bearer_prefix(self) -> None:
        assert extract_bearer_token("Bearer abc.def") == "abc.def"

    @pytest.mark.parametrize("header", [None, ""])
    def test_missing_header(self, header) -> None:
        with pytest.raises(AuthError, match="Authorization header required"):
            extract_bearer_token(header)

    def test_empty_token(self) -> None:
        with pytest.raises(AuthError, match="Unauthorized"):
            extract_bearer_token("Bearer ")


class TestSupabaseIdentityResolver:
    @pytest.mark.asyncio
    async def test_resolves_user(self, supabase_config: SupabaseConfig) -> None:
        transport = json_transport(200, {"id": "user-42", "email": "a@example.com"})
        resolver = SupabaseIdentityResolver(supabase_config, transport=transport)

        identity = await resolver.resolve("token-1")

        assert identity.id == "user-42"
        assert identity.email == "a@example.com"
        request = transport.requests[0]
        assert request.url.path == "/auth/v1/user"
        assert request.headers["Authorization"] == "Bearer token-1"
        assert request.headers["apikey"] == "service-role-key"

    @pytest.mark.asyncio
    async def test_rejected_token(self, supabase_config: SupabaseConfig) -> None:
        transport = json_transport(401, {"msg": "invalid JWT"})
        resolver = SupabaseIdentityResolver(supabase_config, transport=transport)

        with pytest.raises(AuthError, match="Unauthorized"):
            await resolver.resolve("bad-token")

    @pytest.mark.asyncio
    async def test_response_without_id(self, supabase_config: SupabaseConfig) -> None:
        resolver = SupabaseIdentityResolver(supabase_config, transport=json_transport(200, {}))

        with pytest.raises(AuthError):
            await resolver.resolve("token")

    @pytest.mark.asyncio
    async def test_network_failure_is_not_reported_as_bad_credential(
        self, supabase_config: SupabaseConfig
    ) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        resolver = SupabaseIdentityResolver(supabase_config, transport=RecordingTransport(refuse))

        with pytest.raises(IdentityServiceError) as exc_info:
            await resolver.resolve("token")

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [500, 502, 503])
    async def test_identity_service_outage(self, supabase_config: SupabaseConfig, status: int) -> None:
        resolver = SupabaseIdentityResolver(supabase_config, transport=json_transport(status, {"msg": "down"}))

        with pytest.raises(IdentityServiceError):
            await resolver.resolve("token")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 401, 403])
    async def test_client_error_statuses_stay_unauthorized(
        self, supabase_config: SupabaseConfig, status: int
    ) -> None:
        resolver = SupabaseIdentityResolver(supabase_config, transport=json_transport(status, {"msg": "bad jwt"}))

        with pytest.raises(AuthError, match="Unauthorized"):
            await resolver.resolve("token")

    @pytest.mark.asyncio
    async def test_missing_configuration(self) -> None:
        config = SupabaseConfig(url="", service_role_key="", reports_table="t", timeout=1.0)
        transport = json_transport(200, {"id": "x"})
        resolver = SupabaseIdentityResolver(config, transport=transport)

        with pytest.raises(ConfigurationError):
            await resolver.resolve("token")

        assert transport.call_count == 0
