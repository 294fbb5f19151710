import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from birja.controllers import BaseController
from birja.core.exceptions import BadRequestException, DuplicateValueException, UnauthorizedException
from birja.core.password import PasswordHandler
from birja.core.security import JWTHandler
from birja.models import User
from birja.models.role import RoleEnum
from birja.repositories.user import UserRepository
from birja.schemas.responses.auth import LoginResponse, UserResponse

logger = logging.getLogger(__name__)

# verified against when the username is unknown
DUMMY_PASSWORD_HASH = PasswordHandler.hash("unknown-user")


class AuthController(BaseController):

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.user_repo = self.repository(UserRepository)

    async def create_user(self, username: str | None, password: str | None) -> UserResponse:
        if not username or not password:
            raise BadRequestException("username and password required")
        try:
            async with self.session.begin():
                user = await self.user_repo.get_by_username(username)
                if user is not None:
                    raise DuplicateValueException("Username already taken")
                user = await self.user_repo.create_user({
                    'username': username,
                    'password': PasswordHandler.hash(password),
                    'role': RoleEnum.EMPLOYER.value,
                })
        except IntegrityError:
            # lost a race against a concurrent registration of the same name
            raise DuplicateValueException("Username already taken")
        logger.info("Registered employer %s (%s)", user.username, user.id)
        return UserResponse.model_validate(user)

    async def login(self, username: str | None, password: str | None) -> LoginResponse:
        if not username or not password:
            raise BadRequestException("username and password required")
        user = await self.user_repo.get_by_username(username)
        stored_hash = user.password if user is not None else DUMMY_PASSWORD_HASH
        if not PasswordHandler.verify(stored_hash, password) or user is None:
            logger.info("Failed login for %s", username)
            raise UnauthorizedException("Invalid credentials")
        return LoginResponse(
            token=self.issue_token(user),
            user=UserResponse.model_validate(user),
        )

    @staticmethod
    def issue_token(user: User) -> str:
        return JWTHandler.encode_access_token(
            payload={"id": str(user.id), "username": user.username, "role": user.role}
        )

    @staticmethod
    def verify(token: str) -> dict:
        return JWTHandler.decode(token)
