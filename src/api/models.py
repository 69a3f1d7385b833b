"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.

Emails are validated for syntax but passed through unchanged: accounts are
keyed by the exact address the user submitted.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email

MAX_PASSWORD_BYTES = 72  # bcrypt input limit


def _check_email(value: str) -> str:
    """Reject malformed addresses without normalizing valid ones."""
    validate_email(value)
    return value


Email = Annotated[str, AfterValidator(_check_email), Field(json_schema_extra={"format": "email"})]


class SignupRequest(BaseModel):
    """Request model for account signup."""

    username: str = Field(..., min_length=1, max_length=50, description="Display name")
    email: Email
    password: str = Field(
        ..., min_length=8, description="User password (8 characters to 72 UTF-8 bytes)"
    )

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """Request model for login."""

    email: Email
    password: str = Field(..., min_length=1)


class VerifyRequest(BaseModel):
    """Request model for account verification."""

    email: Email
    code: str = Field(
        ...,
        min_length=6,
        max_length=6,
        pattern=r"^\d{6}$",
        description="6-digit verification code",
    )


class ResendRequest(BaseModel):
    """Request model for verification code resend."""

    email: Email


class AccountResponse(BaseModel):
    """Public view of an account. Never exposes credentials or codes."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    username: str
    email: str
    enabled: bool


class MessageResponse(BaseModel):
    """Response model for operations without a payload."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
