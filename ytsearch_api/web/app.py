from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

import psutil
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import SERVICE_NAME, SERVICE_TITLE, VERSION, Settings, get_settings
from ..providers.base import BaseSearchProvider
from ..search.classifier import is_direct_url
from ..search.errors import SearchAPIError, ValidationError
from ..search.models import VideoResult
from ..search.orchestrator import SearchOrchestrator


logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "/api/ytsearch?q=your-query"

AVAILABLE_ENDPOINTS = {
    "root": "/",
    "search": SEARCH_ENDPOINT,
    "health": "/health",
}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _process_snapshot() -> tuple[int, dict]:
    process = psutil.Process()
    uptime = max(0, int(time.time() - process.create_time()))
    memory = process.memory_info()._asdict()
    return uptime, memory


def create_app(
    settings: Settings | None = None,
    provider: BaseSearchProvider | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=SERVICE_TITLE, version=VERSION, redirect_slashes=False)
    app.state.settings = settings
    app.state.orchestrator = SearchOrchestrator(provider)

    # Registered before CORS so error replies still pass through it.
    @app.middleware("http")
    async def _unhandled_error(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("[web] unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                {"error": "Internal server error", "message": str(exc), "timestamp": _now_iso()},
                status_code=500,
            )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(SearchAPIError)
    async def _search_error(request: Request, exc: SearchAPIError) -> JSONResponse:
        logger.info("[web] %s %s -> %d %s", request.method, request.url.path, exc.status_code, exc)
        return JSONResponse(exc.to_payload(), status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code in (404, 405):
            return JSONResponse(
                {"error": "Endpoint not found", "available_endpoints": AVAILABLE_ENDPOINTS},
                status_code=404,
            )
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)

    @app.get("/")
    def index() -> dict:
        return {
            "service": SERVICE_TITLE,
            "version": VERSION,
            "endpoints": {
                "search": SEARCH_ENDPOINT,
                "health": "/health",
            },
            "status": "running",
        }

    @app.get("/api/ytsearch")
    async def ytsearch(request: Request, q: str | None = None) -> JSONResponse:
        if not q:
            raise ValidationError()

        if is_direct_url(q):
            return JSONResponse(VideoResult.direct(q).to_dict())

        orchestrator: SearchOrchestrator = request.app.state.orchestrator
        result = await run_in_threadpool(orchestrator.find_first, q)
        return JSONResponse(result.to_dict())

    @app.get("/health")
    def health() -> dict:
        uptime, memory = _process_snapshot()
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "timestamp": _now_iso(),
            "uptime": uptime,
            "memory": memory,
            "version": VERSION,
        }

    return app


app = create_app()
