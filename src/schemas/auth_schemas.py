"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/v1/auth/register - Create user (registration)
    POST /api/v1/auth/login    - Exchange credentials for a session token
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from src.schemas.user_schemas import UserResponse

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for registration.

    POST /api/v1/auth/register
    Returns: 201 Created
    """

    name: str = Field(..., min_length=1, max_length=255, examples=["Ada Lovelace"])
    email: EmailStr = Field(..., examples=["ada@example.com"])
    mobile_no: str = Field(
        ...,
        min_length=7,
        max_length=32,
        pattern=r"^\+?[0-9]+$",
        description="Mobile number, used as the login identifier",
        examples=["0712345678"],
    )
    password: str = Field(
        ...,
        min_length=8,
        max_length=BCRYPT_MAX_BYTES,
        description="At most 72 bytes once UTF-8 encoded (bcrypt limit)",
    )
    image_url: str | None = Field(None, max_length=1024)

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        """Reject passwords bcrypt would have to truncate."""
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must not exceed {BCRYPT_MAX_BYTES} bytes")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "mobile_no": "0712345678",
                "password": "s3cret-Pass",
            }
        }
    )


class RegisterResponse(BaseModel):
    """Response schema for registration (201 Created)."""

    user: UserResponse
    message: str = Field(
        default="Registration successful. An administrator must activate the account.",
    )


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/v1/auth/login
    """

    identifier: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="Mobile number",
        examples=["0712345678"],
    )
    secret: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Password",
    )


class LoginResponse(BaseModel):
    """Response schema for login."""

    token: str = Field(..., description="Signed session token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    identity: UserResponse
