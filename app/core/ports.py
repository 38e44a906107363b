"""
Port definitions (interfaces) for the core domain.

Ports define the contracts between the core domain and external systems.
Infrastructure adapters implement these ports.
"""

from typing import Protocol

from app.core.domain import EmailRecord, GitHubUser


class IdentityProvider(Protocol):
    """
    Port (interface) for the upstream identity provider.

    Implemented by infrastructure adapters (e.g., GitHubClient). The callback
    service depends on this interface, not on the HTTP client.
    """

    async def exchange_code(self, code: str) -> str:
        """
        Exchange an authorization code for an access token.

        Raises:
            TokenExchangeError: If no usable token is returned
        """
        ...

    async def get_user(self, access_token: str) -> GitHubUser:
        """
        Fetch the authenticated user's profile.

        Raises:
            GitHubAPIError: If the request fails or the payload is malformed
        """
        ...

    async def get_emails(self, access_token: str) -> list[EmailRecord]:
        """
        Fetch the authenticated user's email addresses.

        Raises:
            GitHubAPIError: If the request fails or the payload is malformed
        """
        ...
