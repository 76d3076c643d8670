"""Map exceptions to the `{error, details?}` JSON envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import (
    RecommendationFailure,
    ReviewNotFound,
    ReviewValidationError,
    StoreFailure,
)

log = logging.getLogger(__name__)


async def review_validation_handler(request: Request, exc: ReviewValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


async def review_not_found_handler(request: Request, exc: ReviewNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": exc.message})


async def store_failure_handler(request: Request, exc: StoreFailure) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": exc.summary, "details": exc.details})


async def recommendation_failure_handler(request: Request, exc: RecommendationFailure) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": exc.summary, "details": exc.details})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        message = "Method not allowed"
    else:
        message = exc.detail
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    log.info("Rejected request to %s: %s", request.url.path, details)
    return JSONResponse(status_code=400, content={"error": "Invalid request body", "details": details})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ReviewValidationError, review_validation_handler)
    app.add_exception_handler(ReviewNotFound, review_not_found_handler)
    app.add_exception_handler(StoreFailure, store_failure_handler)
    app.add_exception_handler(RecommendationFailure, recommendation_failure_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
