"""
Authentication Use Cases

Signup gated by core-team approval, email confirmation and login.
"""

from .confirm_email_use_case import ConfirmEmailUseCase
from .dtos import ConfirmEmailResponse, LoginResponse, SignupCommand, SignupResponse
from .login_use_case import LoginUseCase
from .signup_use_case import SignupUseCase

__all__ = [
    # Use Cases
    "SignupUseCase",
    "ConfirmEmailUseCase",
    "LoginUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SignupResponse",
    "ConfirmEmailResponse",
    "LoginResponse",
]
