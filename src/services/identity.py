"""Resolve the calling user from a bearer credential"""

import logging
from dataclasses import dataclass

import httpx

from src.config.exception_config import AuthError, ConfigurationError, IdentityServiceError
from src.config.settings import SupabaseConfig

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """Authenticated caller"""

    id: str
    email: str | None = None


def extract_bearer_token(authorization: str | None) -> str:
    """
    Pull the token out of an Authorization header value.

    Raises:
        AuthError: Header is missing or carries no token
    """
    if not authorization:
        raise AuthError("Authorization header required")
    token = authorization.replace(BEARER_PREFIX, "", 1).strip()
    if not token:
        raise AuthError("Unauthorized")
    return token


class SupabaseIdentityResolver:
    """Looks the token up against the Supabase auth API"""

    def __init__(self, config: SupabaseConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport

    async def resolve(self, token: str) -> Identity:
        """
        Resolve a token to the user it was issued for.

        Raises:
            ConfigurationError: Supabase URL or key is not configured
            AuthError: Token does not resolve to a user
            IdentityServiceError: Lookup failed in transit or with a 5xx
        """
        if self.config.missing():
            raise ConfigurationError("Supabase configuration not complete")

        url = f"{self.config.url}/auth/v1/user"
        headers = {
            "Authorization": f"{BEARER_PREFIX}{token}",
            "apikey": self.config.service_role_key,
        }

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport) as client:
                response = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Identity lookup failed: {e!r}")
            raise IdentityServiceError() from e

        if response.is_server_error:
            logger.error(f"Identity service error: {response.status_code} {response.text}")
            raise IdentityServiceError()

        if not response.is_success:
            logger.warning(f"Identity lookup rejected: {response.status_code}")
            raise AuthError("Unauthorized")

        try:
            data = response.json()
        except ValueError as e:
            raise AuthError("Unauthorized") from e

        user_id = data.get("id") if isinstance(data, dict) else None
        if not user_id:
            raise AuthError("Unauthorized")

        return Identity(id=str(user_id), email=data.get("email"))
