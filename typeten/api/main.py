"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount router with practice endpoints under /v1 prefix
  - Expose health check and metrics endpoints
  - Seed the local development user on startup (if enabled)

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - interfaces.api.http.router: users / texts / sessions endpoints
  - application.dev_seed_user: ensure_dev_user

Notes:
  - Middleware order matters: RequestContext → CORS → routes
  - /v1 prefix allows API versioning
  - /healthz follows Kubernetes health check convention
  - /metrics exposes Prometheus metrics

Run:
  uvicorn typeten.api.main:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..application.dev_seed_user import ensure_dev_user
from ..container import get_user_repository
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.metrics import get_metrics_response
from ..crosscutting.middleware import RequestContextMiddleware
from ..interfaces.api.http.router import build_router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()

    try:
        ensure_dev_user(settings, user_repo=get_user_repository())
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise

    logger.info(
        "Typeten API starting up",
        extra={
            "app_env": settings.app_env,
            "fragment_size": settings.fragment_size,
            "dev_seed_user": settings.dev_seed_user,
        },
    )
    yield
    logger.info("Typeten API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Typeten API",
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "users", "description": "User registration"},
            {"name": "texts", "description": "Practice texts and fragments"},
            {"name": "sessions", "description": "Typing sessions and progress"},
        ],
    )

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-User-Id", "X-Request-Id"],
    )

    app.include_router(build_router(), prefix="/v1")
    register_exception_handlers(app)

    @app.get("/healthz", tags=["ops"])
    def healthz(request: Request):
        """
        R: Liveness check (storage is in-process, nothing external to verify).

        Returns:
            ok: always True while the process serves requests
            version: service version
            request_id: Correlation ID for this request
        """
        return {
            "ok": True,
            "version": __version__,
            "request_id": getattr(request.state, "request_id", None),
        }

    @app.get("/metrics", tags=["ops"])
    def metrics():
        body, content_type = get_metrics_response()
        return Response(content=body, media_type=content_type)

    return app


app = create_app()
