from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from item_api import config
from item_api.responses import PrettyJSONResponse
from item_api.schemas import ErrorResponse


class ApiError(Exception):
    """A failure that maps straight onto an HTTP status and an error payload."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def invalid_id() -> ApiError:
    return ApiError(400, "Invalid ID")


def invalid_item() -> ApiError:
    return ApiError(400, "Invalid item data")


def item_not_found() -> ApiError:
    return ApiError(404, "Item not found")


def not_found() -> ApiError:
    return ApiError(404, "Not found")


def method_not_allowed() -> ApiError:
    return ApiError(405, "Method not allowed")


def error_response(status_code: int, message: str) -> PrettyJSONResponse:
    return PrettyJSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def api_error_handler(request: Request, exc: ApiError) -> PrettyJSONResponse:
    return error_response(exc.status_code, exc.message)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> PrettyJSONResponse:
    # Methods are screened before routing, so a 405 from the router means
    # no route exists for this path under a supported method.
    if exc.status_code in {404, 405}:
        return error_response(404, "Not found")
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> PrettyJSONResponse:
    expose = getattr(request.app.state, "expose_errors", config.EXPOSE_ERRORS)
    message = str(exc) if expose else "Internal server error"
    return error_response(500, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
