"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from revolving_credit.api.middleware import RequestIDMiddleware, MetricsMiddleware
from revolving_credit.api.v1 import calculate, cimb
from revolving_credit.infrastructure.observability.logging import setup_logging
from revolving_credit.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Revolving Credit Calculator",
        description="Credit card interest, minimum payment and payoff schedule service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(calculate.router, prefix=settings.api_prefix, tags=["revolving-credit"])
    app.include_router(cimb.router, prefix=settings.api_prefix, tags=["loan-interest"])

    return app


app = create_app()
