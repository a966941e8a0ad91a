import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from affirmations.errors import ActionError, InputValidationError, TransportError, UnauthorizedError
from affirmations.services.auth_service import AuthService

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(messages) or "Invalid input."


def _bearer_token(request: Request):
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    return token.strip() if scheme.lower() == "bearer" else None


def _respond(request: Request, error: ActionError, headers=None) -> JSONResponse:
    logger.warning(error.message, extra={"error_code": error.code, "path": request.url.path})
    return JSONResponse(status_code=error.http_status, content=error.to_response(), headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ActionError)
    async def action_error_handler(request: Request, exc: ActionError):
        return _respond(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # FastAPI decodes the JSON body before resolving dependencies, so the
        # identity check has to run here for undecodable bodies.
        if any(error.get("type") == "json_invalid" for error in exc.errors()):
            try:
                AuthService.require_user(_bearer_token(request))
            except UnauthorizedError as auth_error:
                return _respond(request, auth_error)

        return _respond(request, InputValidationError(_format_validation_errors(exc)))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        error = TransportError(exc.status_code, str(exc.detail))
        return _respond(request, error, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error", exc_info=exc,
            extra={"error_code": ActionError.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ActionError("Internal server error.").to_response(),
        )
