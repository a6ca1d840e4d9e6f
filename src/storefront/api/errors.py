"""Exception handlers that map domain and auth errors onto HTTP responses.

Every error body uses the same envelope::

    {"status": "fail", "error": <messages>}   # 4xx
    {"status": "error", "error": <messages>}  # 5xx

Domain errors carry Protean's ``{field: [messages]}`` dict.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.account.authentication import AuthenticationError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def error_response(status_code: int, error) -> JSONResponse:
    status = "error" if status_code >= 500 else "fail"
    return JSONResponse(status_code=status_code, content={"status": status, "error": error})


def _messages(exc):
    return getattr(exc, "messages", None) or str(exc)


def _request_errors(exc: RequestValidationError) -> dict:
    """Collapse pydantic's error list into ``{field: [messages]}``."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "request"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return errors


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(400, _messages(exc))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(400, _request_errors(exc))


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return error_response(401, str(exc))


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return error_response(404, _messages(exc))


async def conflict_handler(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("concurrent_modification", path=request.url.path, error=str(exc))
    return error_response(409, str(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, exc.detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", method=request.method, path=request.url.path)
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(ExpectedVersionError, conflict_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
