"""Main application file for FastAPI app"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from task_management.api.v1 import api_router
from task_management.core import settings
from task_management.core.exceptions import InvalidRequestError, ValidationFailedError
from task_management.models import ValidationResultViewModel
from task_management.validation import PydanticModelState

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Application lifespan"""
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    logger.info("Starting %s %s", settings.APP_NAME, settings.APP_VERSION)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_PREFIX)


def _validation_response(result: ValidationResultViewModel) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=result.model_dump(mode="json", by_alias=True),
    )


# Exception handlers
@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer binding errors with a validation result."""
    result = ValidationResultViewModel.from_model_state(PydanticModelState.from_exception(exc))
    logger.info("Request to %s failed binding: %s", request.url.path, result.errors)
    return _validation_response(result)


@app.exception_handler(ValidationFailedError)
async def validation_failed_handler(request: Request, exc: ValidationFailedError) -> JSONResponse:
    """Answer failed form validation with the collected result."""
    return _validation_response(exc.result)


@app.exception_handler(InvalidRequestError)
async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> JSONResponse:
    """Answer requests that cannot be processed with a general error."""
    logger.info("Rejected request to %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationResultViewModel.fail(exc.message).model_dump(mode="json", by_alias=True),
    )


# Health check endpoints
@app.get("/", tags=["health"], include_in_schema=False)
async def root():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "app_version": settings.APP_VERSION,
    }


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}
