from http import HTTPStatus


class CustomException(Exception):
    code = HTTPStatus.BAD_GATEWAY
    message = HTTPStatus.BAD_GATEWAY.description

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class BadRequestException(CustomException):
    code = HTTPStatus.BAD_REQUEST
    message = "Bad request"


class UnauthorizedException(CustomException):
    code = HTTPStatus.UNAUTHORIZED
    message = "Unauthorized"


class ForbiddenException(CustomException):
    code = HTTPStatus.FORBIDDEN
    message = "Forbidden"


class NotFoundException(CustomException):
    code = HTTPStatus.NOT_FOUND
    message = "Not found"


class DuplicateValueException(CustomException):
    code = HTTPStatus.CONFLICT
    message = "Duplicate value"


class ServerErrorException(CustomException):
    code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "Server error"
