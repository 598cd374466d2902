"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from card_payoff.api.middleware import RequestIDMiddleware, MetricsMiddleware
from card_payoff.api.v1 import cards, installments, payments, rates
from card_payoff.infrastructure.observability.logging import setup_logging
from card_payoff.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Card Payoff Calculator",
        description="Credit card interest, payoff and installment schedules",
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
    app.include_router(rates.router, prefix="/v1", tags=["rates"])
    app.include_router(payments.router, prefix="/v1", tags=["payments"])
    app.include_router(installments.router, prefix="/v1", tags=["installments"])
    app.include_router(cards.router, prefix="/v1", tags=["cards"])

    return app


app = create_app()
