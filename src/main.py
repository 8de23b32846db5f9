"""FastAPI application entry point.

Run with: uvicorn src.main:app --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.rv_common.errors import AppError
from src.rv_common.redis_client import close_redis
from src.rv_common.response import error_response
from src.rv_credentials.api.router import router as credential_router
from src.rv_gateway.middleware.request_log import RequestLogMiddleware
from src.rv_revenue.api.router import router as revenue_router
from src.rv_revenue.application.scheduler import RefreshScheduler
from src.rv_revenue.application.service import close_http_client, get_orchestrator

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: start the refresh timer. Shutdown: stop it, close clients."""
    scheduler: RefreshScheduler | None = None
    if settings.AUTO_REFRESH:
        scheduler = RefreshScheduler(get_orchestrator(), settings.REFRESH_INTERVAL_SECONDS)
        scheduler.start()
    yield
    if scheduler is not None:
        await scheduler.stop()
    await close_http_client()
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, getattr(request.state, "request_id", None))
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(revenue_router, prefix="/api/v1")
app.include_router(credential_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
