"""Authentication-related request and response schemas."""

from pydantic import Field

from app.schemas.common import CamelModel


class TokenRequest(CamelModel):
    """Payload for exchanging credentials for a token."""

    email_address: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)


class TokenResponse(CamelModel):
    """JWT response payload."""

    token: str
    id: int
