from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from clubhub.api.error import raise_error
from clubhub.app.services.unit_of_work import UnitOfWork
from clubhub.app.use_cases.auth import (
    ConfirmEmailUseCase,
    LoginResponse,
    LoginUseCase,
    SignupCommand,
    SignupResponse,
    SignupUseCase,
)
from clubhub.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Password strength is a business rule and is checked by the use case.
    """

    email: EmailStr = Field(..., description="Approved email address")
    password: str = Field(..., description="Password")
    confirm_password: str = Field(..., description="Password confirmation")


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse)
async def signup(request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Signup for an approved email.

    Raises:
        - 403 Forbidden: EMAIL_NOT_ELIGIBLE
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 422: MISSING_FIELDS, PASSWORDS_DO_NOT_MATCH, WEAK_PASSWORD
    """
    use_case = SignupUseCase(uow, verification_ttl_hours=ApplicationConfig.VERIFICATION_TOKEN_TTL_HOURS)
    result = await use_case.execute(
        SignupCommand(
            email=request.email,
            password=request.password,
            confirm_password=request.confirm_password,
        )
    )

    if result.is_err():
        raise_error(result.error)

    return result.value


@router.get("/confirm", status_code=status.HTTP_303_SEE_OTHER)
async def confirm(
    token_hash: Optional[str] = Query(None),
    verification_type: Optional[str] = Query(None, alias="type"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Email verification callback.

    Redirects (303) to /{role} on success and to /error on any failure.
    """
    result = await ConfirmEmailUseCase(uow).execute(token_hash, verification_type)

    if result.is_err():
        return RedirectResponse("/error", status_code=status.HTTP_303_SEE_OTHER)

    return RedirectResponse(result.value.redirect_to, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 401 Unauthorized: ACCOUNT_NOT_FOUND, INVALID_CREDENTIALS
        - 403 Forbidden: EMAIL_NOT_CONFIRMED
    """
    result = await LoginUseCase(uow).execute(request.email, request.password)

    if result.is_err():
        raise_error(result.error)

    return result.value
