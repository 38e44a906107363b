"""
Core domain models for the GitHub login callback.

GitHubUser and EmailRecord mirror the upstream API payloads. UserProfile is
the normalized record handed back to the browser application.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

PROVIDER_NAME = "github"


class GitHubUser(BaseModel):
    """
    Profile returned by GET /user.

    Every field is optional; only the ones used for the profile are declared.
    """

    id: Any = Field(default=None, description="GitHub user ID, passed through as-is")
    login: Optional[str] = Field(default=None, description="GitHub handle")
    name: Optional[str] = Field(default=None, description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar image URL")

    model_config = ConfigDict(extra="ignore")


class EmailRecord(BaseModel):
    """One entry of the GET /user/emails response."""

    email: Optional[str] = None
    primary: bool = False
    verified: bool = False

    model_config = ConfigDict(extra="ignore")


class UserProfile(BaseModel):
    """
    Normalized profile sent to the client in the redirect fragment.

    Field order is the serialization order. `id` is omitted from the JSON
    when GitHub did not provide one.
    """

    provider: str = PROVIDER_NAME
    id: Any = None
    name: str = ""
    email: str = ""
    avatar: str = ""

    @classmethod
    def from_github(cls, user: GitHubUser, email: str = "") -> "UserProfile":
        """
        Build the profile from the upstream user and the selected email.

        The display name falls back to the login, then to an empty string.
        """
        return cls(
            id=user.id,
            name=user.name or user.login or "",
            email=email,
            avatar=user.avatar_url or "",
        )

    def to_json(self) -> str:
        """Compact JSON representation, without an `id` key when absent."""
        return self.model_dump_json(exclude_none=True)
