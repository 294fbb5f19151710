from typing import Optional
from fastapi import Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from birja.core.exceptions import ForbiddenException, UnauthorizedException
from birja.models.role import RoleEnum
from birja.core.security import JWTHandler

class JWTBearer(HTTPBearer):
    """Bearer-token gate for protected routes.

    Resolves to the decoded token claims (``id``, ``username``, ``role``).
    Rejects the request before the route body, and therefore before any
    repository access, when the token is missing (401 "Unauthorized"),
    invalid or expired (401 "Invalid token"), or carries a role other than
    ``required_role`` (403 "Forbidden").
    """

    def __init__(self, required_role: Optional[RoleEnum] = None):
        super(JWTBearer, self).__init__(auto_error=False)
        self.required_role = required_role

    async def __call__(self, request: Request) -> dict:
        credentials: HTTPAuthorizationCredentials | None = await super(JWTBearer, self).__call__(request)
        if not credentials or not credentials.credentials:
            raise UnauthorizedException("Unauthorized")

        payload = JWTHandler.decode(credentials.credentials)
        if self.required_role and payload.get("role") != self.required_role.value:
            raise ForbiddenException("Forbidden")

        request.state.user = payload
        return payload


get_current_user = JWTBearer()
require_employer = JWTBearer(RoleEnum.EMPLOYER)
