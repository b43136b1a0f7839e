"""Authentication schemas."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Schema for the login form."""

    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    message: str = "Login successful"


class VerifyResponse(BaseModel):
    valid: bool


class MessageResponse(BaseModel):
    message: str
