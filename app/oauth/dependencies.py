"""
FastAPI dependencies for the OAuth callback endpoint.

Provides dependency injection for configuration, the callback service,
and redirect-origin resolution.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.core.services import GitHubCallbackService
from app.infrastructure.github_client import GitHubClient
from app.oauth.config import GitHubOAuthConfig, get_oauth_config


def get_callback_service(
    config: Annotated[GitHubOAuthConfig, Depends(get_oauth_config)],
) -> GitHubCallbackService:
    """
    Provide the callback service dependency.

    Wires the core service with the GitHub infrastructure adapter.
    """
    return GitHubCallbackService(
        provider=GitHubClient(config),
        credentials_configured=config.is_configured(),
    )


def get_site_origin(
    request: Request,
    config: Annotated[GitHubOAuthConfig, Depends(get_oauth_config)],
) -> str:
    """
    Resolve the origin used as the redirect base.

    SITE_ORIGIN wins when set. Otherwise the origin is rebuilt from the
    X-Forwarded-Proto and Host headers set by the fronting proxy. With
    neither, an empty origin yields a site-relative redirect.
    """
    if config.site_origin:
        return config.site_origin

    proto = request.headers.get("x-forwarded-proto")
    host = request.headers.get("host")
    if proto and host:
        return f"{proto}://{host}"
    return ""


CallbackService = Annotated[GitHubCallbackService, Depends(get_callback_service)]
SiteOrigin = Annotated[str, Depends(get_site_origin)]
