from fastapi import APIRouter, Depends
from birja.controllers.auth import AuthController
from birja.core.factory import Factory
from birja.schemas.requests.users import LoginUserRequest, RegisterUserRequest
from birja.schemas.responses.auth import LoginResponse, UserResponse

auth_router = APIRouter(prefix="/api/auth", tags=["AUTH"])


@auth_router.post('/register')
async def register(
    register_user_request: RegisterUserRequest,
    auth_controller: AuthController = Depends(Factory.get_auth_controller)
) -> UserResponse:
    return await auth_controller.create_user(
        username=register_user_request.username, password=register_user_request.password
    )


@auth_router.post("/login")
async def login_user(
    login_user_request: LoginUserRequest,
    auth_controller: AuthController = Depends(Factory.get_auth_controller),
) -> LoginResponse:
    return await auth_controller.login(
        username=login_user_request.username, password=login_user_request.password
    )
