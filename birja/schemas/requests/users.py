from typing import Optional

from pydantic import BaseModel


class RegisterUserRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginUserRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
