"""
Errori API con body strutturato {"error", "message", "statusCode"}.

Le route sollevano ApiError nella "Validation area"; gli handler registrati
in main.py li trasformano nella risposta JSON. Qualsiasi altra eccezione
diventa un 500 generico (loggato con traceback).
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from skypath.models.schemas import ErrorOut

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, code: str, message: str, status_code: int = 400):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code


def _error_response(code: str, message: str, status_code: int) -> JSONResponse:
    body = ErrorOut(error=code, message=message, status_code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _error_response(exc.code, exc.message, exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error during %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(
        "INTERNAL_ERROR",
        "An unexpected error occurred. Please try again later.",
        500,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
