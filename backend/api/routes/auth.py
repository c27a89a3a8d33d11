"""
Authentication endpoints.

Registration, login and the "am I authenticated" check.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from modules.auth.exceptions import EmailAlreadyExistsError, InvalidCredentialsError
from modules.auth.gate import AuthorizationGate
from modules.auth.interfaces import IAuthService
from modules.auth.models import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenStatusResponse,
)
from shared.exceptions import ValidationError
from ..dependencies import get_auth_service, get_gate

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """
    Create an account.

    The returned user never carries the password hash.
    """
    try:
        user = await service.register(request.username, request.email, request.password)
    except (EmailAlreadyExistsError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=e.message)
    return RegisterResponse(user=user)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Exchange email and password for a token valid for one hour.

    Unknown email and wrong password get the same 401.
    """
    try:
        result = await service.login(request.email, request.password)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )
    return LoginResponse(token=result.token, user=result.user)


@router.get("/me", response_model=TokenStatusResponse)
async def token_status(
    request: Request,
    gate: AuthorizationGate = Depends(get_gate),
):
    """
    Report whether the presented token is valid.

    Returns 200 with `validToken: true`, otherwise 401 with `validToken: false`.
    """
    if gate.authorize(request.headers):
        return TokenStatusResponse(validToken=True)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=TokenStatusResponse(validToken=False).model_dump(),
    )
