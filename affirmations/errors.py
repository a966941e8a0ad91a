from http import HTTPStatus

from starlette import status


class ActionError(Exception):
    """Base class for errors reported to the caller in the error envelope."""

    code = "INTERNAL_SERVER_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
            },
        }


class UnauthorizedError(ActionError):
    code = "UNAUTHORIZED"
    http_status = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "You must be signed in to perform this action."):
        super().__init__(message)


class NotFoundError(ActionError):
    code = "NOT_FOUND"
    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found.")
        self.resource = resource


class InputValidationError(ActionError):
    code = "BAD_REQUEST"
    http_status = status.HTTP_400_BAD_REQUEST



class TransportError(ActionError):
    """An HTTP error raised by the framework itself, such as an unknown route."""

    def __init__(self, http_status: int, message: str):
        super().__init__(message)
        self.http_status = http_status
        try:
            self.code = HTTPStatus(http_status).name
        except ValueError:
            self.code = "HTTP_ERROR"


__all__ = ["ActionError", "UnauthorizedError", "NotFoundError", "InputValidationError", "TransportError"]
