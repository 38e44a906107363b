"""
Client for the GitHub OAuth and REST APIs.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from app.core.domain import EmailRecord, GitHubUser
from app.core.exceptions import GitHubAPIError, TokenExchangeError
from app.oauth.config import GitHubOAuthConfig

logger = logging.getLogger(__name__)


class GitHubClient:
    """
    Adapter implementing the IdentityProvider port against GitHub.

    Each call opens its own AsyncClient bounded by the configured timeout.
    Access tokens are only ever placed in request headers, never logged.
    """

    def __init__(self, config: GitHubOAuthConfig):
        self._config = config

    def _api_headers(self, access_token: str) -> dict:
        """Get authorization headers for the REST API."""
        return {
            "Authorization": f"Bearer {access_token}",
            "User-Agent": self._config.user_agent,
        }

    async def exchange_code(self, code: str) -> str:
        """
        Exchanges an authorization code for an access token.

        Args:
            code: The authorization code from the callback.

        Returns:
            The access token.

        Raises:
            TokenExchangeError: If the call fails or no token is returned.
        """
        body = {
            "client_id": self._config.client_id,
            "client_secret": self._config.client_secret,
            "code": code,
        }
        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.post(
                    self._config.token_url,
                    json=body,
                    headers={"Accept": "application/json"},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise TokenExchangeError(
                f"Token endpoint returned {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise TokenExchangeError(f"Network error during token exchange: {e}") from e
        except ValueError as e:
            raise TokenExchangeError(f"Token endpoint returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise TokenExchangeError("Token endpoint returned a non-object payload")

        access_token = data.get("access_token")
        if not access_token or not isinstance(access_token, str):
            # GitHub answers 200 with an error code for bad or reused codes
            raise TokenExchangeError(
                f"No access_token in response (error={data.get('error', 'unknown')})"
            )

        return access_token

    async def _get_json(self, path: str, access_token: str, **headers: str) -> Any:
        """
        GET a GitHub API resource and decode its JSON body.

        Raises:
            GitHubAPIError: On HTTP status, network, or JSON decoding errors.
        """
        url = f"{self._config.api_url}{path}"
        request_headers = self._api_headers(access_token)
        request_headers.update(headers)
        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.get(url, headers=request_headers)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise GitHubAPIError(
                f"API request to '{path}' failed: {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise GitHubAPIError(f"Network error while fetching '{path}': {e}") from e
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON from '{path}': {e}") from e

    async def get_user(self, access_token: str) -> GitHubUser:
        """Fetch the authenticated user's profile."""
        data = await self._get_json("/user", access_token)
        try:
            return GitHubUser.model_validate(data)
        except ValidationError as e:
            raise GitHubAPIError(f"Failed to parse user profile: {e}") from e

    async def get_emails(self, access_token: str) -> list[EmailRecord]:
        """Fetch the authenticated user's email addresses."""
        data = await self._get_json(
            "/user/emails", access_token, Accept="application/vnd.github+json"
        )
        if not isinstance(data, list):
            raise GitHubAPIError(
                f"Failed to parse email list: expected an array, got {type(data).__name__}"
            )

        emails = []
        for entry in data:
            try:
                emails.append(EmailRecord.model_validate(entry))
            except ValidationError as e:
                # Skip unreadable entries, keep the rest
                logger.debug(f"Skipping malformed email entry: {e}")
        return emails
