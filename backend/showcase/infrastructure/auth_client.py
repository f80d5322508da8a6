"""Auth Client — resolves a bearer token to a user id via the hosted auth service.

Invariants:
    - 401/403 from the auth service means "not authenticated" (returns None)
    - Any other failure raises ExternalServiceError (auth service down is not a 401)

Design Decisions:
    - Token verification delegated to the provider (GET /user): no signing secret held here
"""

import logging
from uuid import UUID

import httpx

from showcase.core.domain_types import UserId
from showcase.core.errors import ExternalServiceError

logger = logging.getLogger(__name__)


class AuthClient:
    """Thin wrapper over the auth provider's current-user endpoint."""

    def __init__(self, http: httpx.AsyncClient, base_url: str, api_key: str):
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    async def get_user_id(self, access_token: str) -> UserId | None:
        try:
            resp = await self._http.get(
                f"{self._base_url}/user",
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "apikey": self._api_key,
                },
            )
        except httpx.HTTPError as e:
            logger.error(f"Auth request failed: {e}", extra={"service": "auth"})
            raise ExternalServiceError("Auth", str(e))

        if resp.status_code in (401, 403):
            return None
        if resp.status_code >= 400:
            raise ExternalServiceError(
                "Auth", f"status {resp.status_code}", upstream_status=resp.status_code,
            )

        try:
            user_id = resp.json().get("id")
        except (ValueError, AttributeError):
            raise ExternalServiceError(
                "Auth", "response is not a JSON object", upstream_status=resp.status_code,
            )
        try:
            return UserId(UUID(str(user_id)))
        except ValueError:
            logger.warning("Auth service returned a user without a valid id")
            return None
