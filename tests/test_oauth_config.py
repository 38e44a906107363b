"""
Tests for GitHub OAuth configuration.
"""

import os
from unittest.mock import patch

from app.oauth.config import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    GitHubOAuthConfig,
    get_oauth_config,
)


class TestGitHubOAuthConfig:
    """Tests for GitHubOAuthConfig."""

    def test_from_env_loads_variables(self):
        """Test loading config from environment variables."""
        env = {
            "CLIENT_ID": "client-id",
            "CLIENT_SECRET": "client-secret",
            "SITE_ORIGIN": "https://example.com/",
            "GITHUB_HTTP_TIMEOUT": "3.5",
            "GITHUB_USER_AGENT": "custom-agent",
        }

        with patch.dict(os.environ, env, clear=True):
            config = GitHubOAuthConfig.from_env()

        assert config.client_id == "client-id"
        assert config.client_secret == "client-secret"
        assert config.site_origin == "https://example.com"
        assert config.timeout == 3.5
        assert config.user_agent == "custom-agent"

    def test_from_env_accepts_github_prefixed_names(self):
        env = {"GITHUB_CLIENT_ID": "gh-id", "GITHUB_CLIENT_SECRET": "gh-secret"}

        with patch.dict(os.environ, env, clear=True):
            config = GitHubOAuthConfig.from_env()

        assert config.client_id == "gh-id"
        assert config.client_secret == "gh-secret"
        assert config.is_configured() is True

    def test_from_env_handles_missing(self):
        """Test loading config with missing variables."""
        with patch.dict(os.environ, {}, clear=True):
            config = GitHubOAuthConfig.from_env()

        assert config.client_id is None
        assert config.client_secret is None
        assert config.site_origin == ""
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.timeout == DEFAULT_TIMEOUT_SECONDS
        assert config.is_configured() is False

    def test_invalid_timeout_falls_back_to_default(self):
        with patch.dict(os.environ, {"GITHUB_HTTP_TIMEOUT": "soon"}, clear=True):
            config = GitHubOAuthConfig.from_env()

        assert config.timeout == DEFAULT_TIMEOUT_SECONDS

    def test_is_configured_requires_both_credentials(self):
        assert GitHubOAuthConfig(client_id="id", client_secret=None).is_configured() is False
        assert GitHubOAuthConfig(client_id="", client_secret="s").is_configured() is False
        assert GitHubOAuthConfig(client_id="id", client_secret="s").is_configured() is True


class TestGetOAuthConfig:
    """Tests for the config singleton."""

    def test_get_oauth_config_is_cached(self):
        get_oauth_config.cache_clear()
        try:
            with patch.dict(os.environ, {"CLIENT_ID": "a", "CLIENT_SECRET": "b"}, clear=True):
                first = get_oauth_config()
                second = get_oauth_config()
            assert first is second
            assert first.client_id == "a"
        finally:
            get_oauth_config.cache_clear()
