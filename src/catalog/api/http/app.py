"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.errors import (
    register_exception_handlers,
    unexpected_error_response,
)
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.http.routers.service.book import router as book_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.services import DbSessionService
from src.catalog.runtime.context import get_config

__all__ = ["app", "startup", "shutdown"]

main_config = get_config()

configure_logging()


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        # HSTS only in prod
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="Library Catalog API",
    lifespan=lifespan,
    docs_url=None if main_config.app.environment == "production" else "/docs",
    redoc_url=None if main_config.app.environment == "production" else "/redoc",
)

app.add_middleware(SecurityHeadersMiddleware)

# --- CORS configuration ---
if main_config.app.environment == "production" and (
    "*" in main_config.app.cors.origins
):
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=main_config.app.cors.origins,
    allow_credentials=main_config.app.cors.allow_credentials,
    allow_methods=main_config.app.cors.allow_methods,
    allow_headers=main_config.app.cors.allow_headers,
)

register_exception_handlers(app)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            response = unexpected_error_response(exc)
            response.headers["X-Request-ID"] = request_id
            return response


# --- Router registration ---
app.include_router(health_router)
app.include_router(book_router)


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService()
    if config.database.create_tables:
        database_service.create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=main_config.app.host,
        port=main_config.app.port,
        access_log=False,  # We handle access logging in middleware
    )
