"""
OAuth2 API endpoints.

Provides the GitHub login callback:
- GET /oauth/github/callback - Exchange the code, redirect with the profile
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from app.core.exceptions import OAuthCallbackError, UnexpectedOAuthError
from app.oauth.dependencies import CallbackService, SiteOrigin


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/oauth", tags=["oauth"])


@router.get("/github/callback")
async def github_callback(
    service: CallbackService,
    origin: SiteOrigin,
    code: str | None = None,
    state: str | None = None,
):
    """
    Handle OAuth2 callback from GitHub.

    Exchanges the authorization code for a token, fetches the user's
    profile and email, and redirects to the login page with the profile
    encoded in the URL fragment. The access token never leaves the server.

    Args:
        service: Callback service
        origin: Resolved site origin for the redirect
        code: Authorization code issued by GitHub
        state: Opaque client state, passed through unchanged

    Returns:
        302 redirect to the login page

    Raises:
        OAuthCallbackError: Rendered as a plain-text error response
    """
    try:
        location = await service.complete_login(code, state, origin)
    except OAuthCallbackError:
        # Rendered by the exception handler in main.py
        raise
    except Exception as e:
        logger.error(f"Unexpected error during OAuth callback: {e}", exc_info=True)
        raise UnexpectedOAuthError(str(e)) from e

    return RedirectResponse(url=location, status_code=status.HTTP_302_FOUND)
