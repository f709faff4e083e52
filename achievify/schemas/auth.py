"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserRegister(BaseModel):
    """User registration request. Presence is checked by the service."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str | None = Field(None, alias="fullName", max_length=255)
    username: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    password: str | None = Field(None, max_length=128)


class UserLogin(BaseModel):
    """User login request. ``userOrEmail`` matches either column exactly."""

    model_config = ConfigDict(populate_by_name=True)

    user_or_email: str | None = Field(None, alias="userOrEmail")
    password: str | None = None


class UserResponse(BaseModel):
    """Public user projection. Never includes the password hash."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    full_name: str = Field(alias="fullName")
    username: str
    email: str


class LoginResponse(BaseModel):
    """Login response with the public user."""

    message: str
    user: UserResponse


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
