import datetime
import jwt
from birja.core.exceptions import UnauthorizedException
from birja.core.settings import settings



class JWTHandler:

    secret_key = settings.SECRET_KEY
    algorithm = settings.JWT_ALGORITHM
    access_expire_minutes = settings.JWT_ACCESS_EXPIRE_MINUTES

    @staticmethod
    def encode_access_token(payload: dict, expires_delta: datetime.timedelta | None = None) -> str:
        if expires_delta is None:
            expires_delta = datetime.timedelta(minutes=JWTHandler.access_expire_minutes)
        expire = datetime.datetime.now(datetime.timezone.utc) + expires_delta
        payload = {**payload, "exp": expire, "type": "access"}
        return jwt.encode(payload, JWTHandler.secret_key, algorithm=JWTHandler.algorithm)

    @staticmethod
    def decode(token: str) -> dict:
        try:
            payload = jwt.decode(
                token,
                JWTHandler.secret_key,
                algorithms=[JWTHandler.algorithm],
            )
        except jwt.InvalidTokenError:
            # expired, malformed and forged tokens share one message
            raise UnauthorizedException("Invalid token")
        if payload.get("type") != "access":
            raise UnauthorizedException("Invalid token")
        return payload
