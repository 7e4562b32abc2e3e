import uuid
from contextlib import asynccontextmanager

import uvicorn
from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging.logger import set_package_logger
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI, Request, status
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse, UJSONResponse
from mangum import Mangum
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.api.api import router as api_router
from blog_api.context import close_context, open_context
from blog_api.exceptions import (
    INTERNAL_SERVER_ERROR,
    NOT_FOUND,
    MissingFieldException,
    error_response,
)
from blog_api.middlewares import CorrelationIdMiddleware, RequestLoggingMiddleware
from blog_api.settings import Settings

logger = Logger(utc=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    app.state.context = await run_in_threadpool(open_context, settings)
    logger.info(f"{settings.app_name} is ready on port {settings.port}")
    try:
        yield
    finally:
        await run_in_threadpool(close_context, app.state.context)


def register_exception_handlers(app: FastAPI, settings: Settings):
    @app.exception_handler(MissingFieldException)
    async def missing_field_handler(
        request: Request, error: MissingFieldException
    ) -> PlainTextResponse:
        logger.warning(error.detail)
        return PlainTextResponse(error.detail, status_code=error.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, error: StarletteHTTPException
    ) -> UJSONResponse:
        if error.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND)
        logger.warning(f"Received http exception {error.status_code=} {error.detail=}")
        return error_response(error.status_code, error.detail)

    @app.exception_handler(BotoCoreError)
    @app.exception_handler(ClientError)
    @app.exception_handler(ValidationError)
    async def internal_error_handler(
        request: Request, error: Exception
    ) -> UJSONResponse:
        error_id = uuid.uuid4()
        logger.exception(f"Received {type(error).__name__} {error_id=}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(error) if settings.debug else INTERNAL_SERVER_ERROR,
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    if settings.debug:
        set_package_logger()

    app = FastAPI(
        debug=settings.debug,
        title="BlogPostsApp",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_middleware(RequestLoggingMiddleware, debug=settings.debug)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(GZipMiddleware)
    app.include_router(api_router)
    register_exception_handlers(app, settings)
    return app


app = create_app()

handler = Mangum(app)
handler.__name__ = "handler"
handler = logger.inject_lambda_context(handler, clear_state=True, log_event=True)


def main():
    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
