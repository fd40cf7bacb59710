"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """Signup intent, created by the API layer from the request body"""

    email: str
    password: str
    confirm_password: str


# ============================================================================
# Response DTOs
# ============================================================================


class SignupResponse(BaseModel):
    """
    Signup response - carries the verification link payload.

    The caller delivers token_hash to the user (verification email);
    it is exchanged at the confirmation callback.
    """

    email: str
    token_hash: str
    type: str = "signup"
    redirect_to: str = "/pending-verification"


class ConfirmEmailResponse(BaseModel):
    """Response for email confirmation callback"""

    user_id: str
    role: str
    redirect_to: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    token_type: str = "bearer"
    role: str
    redirect_to: str
