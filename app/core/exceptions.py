"""
Domain exceptions for the OAuth callback flow.

Each exception carries the HTTP status and the fixed public message that is
sent to the browser. They are rendered by the centralized exception handler
in main.py. Internal detail goes in the exception text (for logs only) and
never reaches the response body.
"""


class OAuthCallbackError(Exception):
    """Base class for errors that terminate the callback flow."""

    status_code: int = 500
    public_message: str = "OAuth error"


class MissingCodeError(OAuthCallbackError):
    """
    Raised when the callback request carries no authorization code.

    Client-side error: no upstream call is attempted.
    """

    status_code = 400
    public_message = "Missing code"


class ConfigurationError(OAuthCallbackError):
    """
    Raised when the GitHub client credentials are not configured.

    Operator misconfiguration rather than a problem with the request.
    """

    public_message = "Server not configured: missing GitHub client credentials"


class TokenExchangeError(OAuthCallbackError):
    """
    Raised when GitHub does not return a usable access token.

    The code may be expired, already used, or invalid. All of these collapse
    into one message so provider internals are not leaked.
    """

    status_code = 400
    public_message = "Could not obtain access token"


class UnexpectedOAuthError(OAuthCallbackError):
    """Raised for any other failure in the flow (network fault, bad payload)."""

    pass


class GitHubAPIError(Exception):
    """Raised for errors interacting with the GitHub REST API."""

    pass
