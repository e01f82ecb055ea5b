"""
Wanderlust Tours -- FastAPI Application
Serves destinations, tours and editorial content from an in-memory store
and accepts inquiry, contact and newsletter submissions.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging
import logging.config
import time

from slowapi.errors import RateLimitExceeded

from wanderlust.core.config import settings
from wanderlust.core.rate_limiting import limiter, rate_limit_handler
from wanderlust.db.store import MemoryStore
from wanderlust.api import health, routes_content, routes_destinations, routes_submissions, routes_tours

# Configure logging
logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        },
        "detailed": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
        },
        "json": {
            "()": "wanderlust.core.monitoring.JSONFormatter",
        },
    },
    "handlers": {
        "default": {
            "formatter": "json" if settings.log_format == "json" else "detailed",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "wanderlust": {"handlers": ["default"], "level": settings.log_level},
        "uvicorn": {"handlers": ["default"], "level": "INFO"},
    },
}

logging.config.dictConfig(logging_config)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the store on startup. Nothing to flush on shutdown."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    store: MemoryStore = app.state.store
    if not store.seeded:
        store.seed()
    logger.info("Application startup complete -- ready to serve")

    yield

    logger.info("Application shutting down")


def create_app(store: Optional[MemoryStore] = None) -> FastAPI:
    """
    Build the application around a store instance.
    Each app owns exactly one store; pass one in to share or pre-seed it.
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Wanderlust Tours -- destinations, tour packages, inquiries and newsletter.",
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else MemoryStore()

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

    # GZip compression (min 500 bytes)
    app.add_middleware(GZipMiddleware, minimum_size=500)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.middleware("http")
    async def request_middleware(request: Request, call_next):
        """Log requests with timing and add security headers."""
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        response.headers["X-Process-Time"] = f"{elapsed:.3f}"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {elapsed:.3f}s")
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTP errors as {"error": ...}; dict details are passed through."""
        content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed query strings or bodies are client errors (400)."""
        details = [
            {"field": ".".join(str(part) for part in err["loc"][1:]) or str(err["loc"][0]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions without leaking internals."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc) if settings.debug else "An unexpected error occurred",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    # Include routers
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(routes_destinations.router, prefix=settings.api_prefix)
    app.include_router(routes_tours.router, prefix=settings.api_prefix)
    app.include_router(routes_content.router, prefix=settings.api_prefix)
    app.include_router(routes_submissions.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Root -- API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "health": f"{settings.api_prefix}/health/",
        }

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "wanderlust.main:app",
        host=settings.api_host,
        port=settings.api_port,
        workers=settings.api_workers,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
