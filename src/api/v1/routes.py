"""
API v1 routes.

Defines REST endpoints for the account verification API:
- POST /v1/auth/signup - Create an unverified account and email a code
- POST /v1/auth/login - Authenticate a verified account
- POST /v1/auth/verify - Verify an account with its emailed code
- POST /v1/auth/resend - Issue a new verification code
"""

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_verification_service
from src.api.models import (
    AccountResponse,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    ResendRequest,
    SignupRequest,
    VerifyRequest,
)
from src.domain.exceptions import (
    AuthenticationError,
    EmailAlreadyRegistered,
    ErrorKind,
    PasswordTooLong,
)
from src.domain.verification import AccountVerificationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["v1"])

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.NOT_VERIFIED: status.HTTP_403_FORBIDDEN,
    ErrorKind.BAD_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.CODE_EXPIRED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CODE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_VERIFIED: status.HTTP_409_CONFLICT,
}


def _raise_http(exc: AuthenticationError) -> NoReturn:
    """Translate a domain failure into an HTTP error without leaking the email."""
    logger.info("Request failed: %s", exc.kind.value)
    raise HTTPException(status_code=ERROR_STATUS[exc.kind], detail=exc.message) from None


@router.post(
    "/signup",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Email already registered"},
        422: {"description": "Validation error"},
    },
    summary="Register a new account",
    description="Create an unverified account. "
    "A 6-digit verification code is sent to the provided email.",
)
async def signup(
    request_data: SignupRequest,
    service: AccountVerificationService = Depends(get_verification_service),
) -> AccountResponse:
    """
    Register a new account and send a verification code.

    - **username**: Display name
    - **email**: Valid email address, stored exactly as submitted
    - **password**: Password (8 characters to 72 UTF-8 bytes)
    """
    try:
        account = service.signup(request_data.username, request_data.email, request_data.password)
    except EmailAlreadyRegistered:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Registration failed",
        ) from None
    except PasswordTooLong:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Password is too long",
        ) from None
    return AccountResponse.model_validate(account)


@router.post(
    "/login",
    response_model=AccountResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
        403: {"model": ErrorResponse, "description": "Account not verified"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
    summary="Log in to a verified account",
)
async def login(
    request_data: LoginRequest,
    service: AccountVerificationService = Depends(get_verification_service),
) -> AccountResponse:
    try:
        account = service.authenticate(request_data.email, request_data.password)
    except AuthenticationError as exc:
        _raise_http(exc)
    return AccountResponse.model_validate(account)


@router.post(
    "/verify",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid or expired code"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Account already verified"},
    },
    summary="Verify account with code",
    description="Submit the 6-digit verification code received via email.",
)
async def verify(
    request_data: VerifyRequest,
    service: AccountVerificationService = Depends(get_verification_service),
) -> MessageResponse:
    try:
        service.verify_user(request_data.email, request_data.code)
    except AuthenticationError as exc:
        _raise_http(exc)
    return MessageResponse(message="Account verified successfully")


@router.post(
    "/resend",
    response_model=MessageResponse,
    responses={
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Account already verified"},
    },
    summary="Resend verification code",
    description="Issue a new verification code valid for one hour.",
)
async def resend(
    request_data: ResendRequest,
    service: AccountVerificationService = Depends(get_verification_service),
) -> MessageResponse:
    try:
        service.resend_verification_code(request_data.email)
    except AuthenticationError as exc:
        _raise_http(exc)
    return MessageResponse(message="Verification code sent")
