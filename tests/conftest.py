"""
Shared test configuration and fixtures.
"""

import base64
import json
from urllib.parse import parse_qsl, urlsplit

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.oauth.config import GitHubOAuthConfig, get_oauth_config

TOKEN_URL = "https://github.com/login/oauth/access_token"
USER_URL = "https://api.github.com/user"
EMAILS_URL = "https://api.github.com/user/emails"

SITE_ORIGIN = "https://site.example"
CLIENT_SECRET = "test-client-secret"


@pytest.fixture
def oauth_config():
    """Configured GitHub OAuth settings; tests may mutate fields."""
    return GitHubOAuthConfig(
        client_id="test-client-id",
        client_secret=CLIENT_SECRET,
        site_origin=SITE_ORIGIN,
        timeout=5.0,
    )


@pytest.fixture
def client(oauth_config):
    """Test client with the OAuth config dependency replaced."""
    app.dependency_overrides[get_oauth_config] = lambda: oauth_config

    yield TestClient(app)

    app.dependency_overrides.pop(get_oauth_config, None)


def decode_redirect(location: str) -> tuple[dict, dict]:
    """
    Split a login redirect into its fragment parameters and decoded profile.

    Returns:
        (fragment parameters, profile dict decoded from the gh parameter)
    """
    params = dict(parse_qsl(urlsplit(location).fragment, keep_blank_values=True))
    gh = params["gh"]
    raw = base64.urlsafe_b64decode(gh + "=" * (-len(gh) % 4))
    return params, json.loads(raw)
