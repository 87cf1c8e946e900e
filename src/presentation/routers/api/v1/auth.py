"""Authentication resource handlers.

Endpoints:
    POST /api/v1/auth/register - Create an (inactive) user account
    POST /api/v1/auth/login    - Exchange identifier and secret for a token

Login failures are always 401 and never say which part was wrong. A missing
signing secret surfaces as a 500 from the global exception handler.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.core.container import get_login_user_handler, get_register_user_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import (
    get_request_trace_id,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from src.schemas.user_schemas import UserResponse

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])


@auth_router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: Request,
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> RegisterResponse | JSONResponse:
    """Create a new user account.

    POST /api/v1/auth/register → 201 Created

    Returns:
        RegisterResponse on success (201 Created).
        JSONResponse with error on failure (409 when the mobile number or
        email is already registered).
    """
    command = RegisterUser(
        name=data.name,
        email=str(data.email),
        mobile_no=data.mobile_no,
        password=data.password,
        image_url=data.image_url,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=user):
            return RegisterResponse(user=UserResponse.from_entity(user))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_request_trace_id(request),
            )


@auth_router.post("/login", response_model=LoginResponse)
async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> LoginResponse | JSONResponse:
    """Authenticate and issue a session token.

    POST /api/v1/auth/login → 200 OK

    Returns:
        LoginResponse with the token and the caller's identity.
        JSONResponse 401 for an unknown identifier, a wrong secret or an
        account that is not active.
    """
    result = await handler.handle(
        LoginUser(identifier=data.identifier, password=data.secret)
    )

    match result:
        case Success(value=login_result):
            return LoginResponse(
                token=login_result.access_token,
                token_type=login_result.token_type,
                expires_in=login_result.expires_in,
                identity=UserResponse.from_entity(login_result.user),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_request_trace_id(request),
            )
