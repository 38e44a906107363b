"""
GitHub OAuth configuration.

Loaded from environment variables. Client credentials are server secrets
and are never sent back to the browser.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


logger = logging.getLogger(__name__)

GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_API_URL = "https://api.github.com"

# GitHub's API rejects requests without a User-Agent
DEFAULT_USER_AGENT = "cnc-autodesign-oauth"
DEFAULT_TIMEOUT_SECONDS = 10.0


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back on bad values."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using default {default}")
        return default


@dataclass
class GitHubOAuthConfig:
    """
    GitHub OAuth settings.

    `site_origin` is optional: when empty, the redirect origin is derived
    from the request's forwarding headers.
    """

    client_id: str | None
    client_secret: str | None
    site_origin: str = ""
    token_url: str = GITHUB_TOKEN_URL
    api_url: str = GITHUB_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "GitHubOAuthConfig":
        """Load configuration from environment variables."""
        return cls(
            client_id=os.getenv("CLIENT_ID") or os.getenv("GITHUB_CLIENT_ID"),
            client_secret=os.getenv("CLIENT_SECRET")
            or os.getenv("GITHUB_CLIENT_SECRET"),
            site_origin=os.getenv("SITE_ORIGIN", "").rstrip("/"),
            user_agent=os.getenv("GITHUB_USER_AGENT") or DEFAULT_USER_AGENT,
            timeout=_env_float("GITHUB_HTTP_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        )

    def is_configured(self) -> bool:
        """Check if both client credentials are present."""
        return bool(self.client_id and self.client_secret)


@lru_cache()
def get_oauth_config() -> GitHubOAuthConfig:
    """Get GitHub OAuth configuration singleton."""
    config = GitHubOAuthConfig.from_env()
    if not config.is_configured():
        logger.warning("GitHub OAuth not configured (missing credentials)")
    return config
