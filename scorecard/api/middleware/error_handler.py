"""
Error Handler Middleware

Renders every failure in one envelope:

    {"error": {"code": "...", "message": "...", "details": {...}}}

Rating rejections come from the service as ScorecardException subclasses
and keep their own status and code:

    400  INVALID_CATEGORY, INVALID_SCORE
    401  AUTHENTICATION_ERROR
    404  NOT_FOUND             (content unknown to the content directory)
    409  ALREADY_RATED, NOT_YET_RATED, CONFLICT (concurrent write)

Requests FastAPI cannot parse at all (e.g. a body that is not JSON) become
400 VALIDATION_ERROR. Anything else is a 500 INTERNAL_ERROR whose cause is
logged, not returned.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from scorecard.shared.core.exceptions import ScorecardException
from scorecard.shared.core.logging import logger


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(ScorecardException)
    async def scorecard_exception_handler(
        request: Request,
        exc: ScorecardException,
    ) -> JSONResponse:
        # Rejections are expected traffic: warning, with the rating key fields
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            status_code=exc.status_code,
            category=exc.details.get("category"),
            content_id=exc.details.get("content_id"),
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = jsonable_encoder(exc.errors(), custom_encoder={ValueError: str})
        logger.warning("Unparseable request", errors=errors, path=request.url.path)
        return _error_response(
            400,
            "VALIDATION_ERROR",
            "Request could not be parsed",
            {"errors": errors},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.error(
            "Unexpected error",
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")
