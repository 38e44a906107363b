"""
Core business logic for the GitHub login callback.

This module contains the code-exchange flow and is independent of
FastAPI and of the HTTP client. It depends only on the IdentityProvider port.
"""

import base64
import logging
from typing import Optional, Sequence
from urllib.parse import quote

from app.core.domain import EmailRecord, UserProfile
from app.core.exceptions import (
    ConfigurationError,
    GitHubAPIError,
    MissingCodeError,
    TokenExchangeError,
)
from app.core.ports import IdentityProvider

logger = logging.getLogger(__name__)

LOGIN_PAGE_PATH = "/web/login/index.html"

# Characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def select_email(emails: Sequence[EmailRecord]) -> str:
    """
    Pick one address from the user's email list.

    Preference order: primary and verified, then the first verified one,
    then the first entry. Returns an empty string for an empty list.
    """
    chosen: Optional[EmailRecord] = next(
        (e for e in emails if e.primary and e.verified), None
    )
    if chosen is None:
        chosen = next((e for e in emails if e.verified), None)
    if chosen is None and emails:
        chosen = emails[0]
    return (chosen.email or "") if chosen is not None else ""


def encode_profile(profile: UserProfile) -> str:
    """Serialize the profile as unpadded base64url JSON."""
    raw = profile.to_json().encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def build_redirect_url(origin: str, payload: str, state: Optional[str] = None) -> str:
    """
    Build the login-page URL carrying the payload in its fragment.

    Args:
        origin: Site origin, may be empty for a site-relative redirect
        payload: base64url-encoded profile
        state: Opaque client state, appended only when non-empty

    Returns:
        Redirect target for the Location header
    """
    fragment = f"gh={quote(payload, safe=_URI_COMPONENT_SAFE)}"
    if state:
        fragment += f"&state={quote(state, safe=_URI_COMPONENT_SAFE)}"
    return f"{origin}{LOGIN_PAGE_PATH}#{fragment}"


class GitHubCallbackService:
    """
    Service for completing a GitHub OAuth login.

    Runs the linear flow: validate input, exchange the code, fetch the
    profile, fetch the emails (best-effort), then build the redirect.
    """

    def __init__(self, provider: IdentityProvider, credentials_configured: bool):
        """
        Initialize the service.

        Args:
            provider: Identity provider adapter (e.g., GitHubClient)
            credentials_configured: Whether client id and secret are set
        """
        self.provider = provider
        self.credentials_configured = credentials_configured

    async def resolve_email(self, access_token: str) -> str:
        """
        Look up the user's preferred email address.

        Upstream failures are absorbed: a profile without an email is
        still returned to the client.
        """
        try:
            emails = await self.provider.get_emails(access_token)
        except GitHubAPIError as e:
            logger.warning(f"Email lookup failed, continuing without email: {e}")
            return ""
        return select_email(emails)

    async def build_profile(self, code: str) -> UserProfile:
        """
        Exchange the code and assemble the normalized profile.

        Raises:
            TokenExchangeError: If GitHub returns no access token
            GitHubAPIError: If the profile fetch fails
        """
        try:
            access_token = await self.provider.exchange_code(code)
        except TokenExchangeError as e:
            logger.warning(f"Token exchange failed: {e}")
            raise

        user = await self.provider.get_user(access_token)
        email = await self.resolve_email(access_token)
        return UserProfile.from_github(user, email)

    async def complete_login(
        self, code: Optional[str], state: Optional[str], origin: str
    ) -> str:
        """
        Handle one callback and return the redirect target.

        Args:
            code: Authorization code from the query string
            state: Opaque client state from the query string
            origin: Site origin used as the redirect base

        Returns:
            URL of the login page with the encoded profile in the fragment

        Raises:
            MissingCodeError: If no code was supplied
            ConfigurationError: If client credentials are missing
            TokenExchangeError: If the code could not be exchanged
        """
        if not code:
            logger.warning("OAuth callback received without code")
            raise MissingCodeError("code query parameter missing")

        if not self.credentials_configured:
            logger.error("GitHub OAuth not configured (missing client credentials)")
            raise ConfigurationError("CLIENT_ID or CLIENT_SECRET is not set")

        profile = await self.build_profile(code)

        logger.info(
            "GitHub login completed",
            extra={"extra_fields": {"github_id": profile.id, "has_email": bool(profile.email)}},
        )

        return build_redirect_url(origin, encode_profile(profile), state)
