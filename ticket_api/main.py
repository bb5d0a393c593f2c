from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ticket_api.api.routes import health, tickets
from ticket_api.core.config import get_settings
from ticket_api.core.logging import configure_logging
from ticket_api.core.tracing import init_tracer, shutdown_tracer
from ticket_api.metrics import MetricsRegistry, register_default_metrics
from ticket_api.tickets.store import TicketStore


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - executed by framework
    settings = get_settings()
    logger = configure_logging(settings)
    tracer_provider = init_tracer(settings)

    app.state.logger = logger
    app.state.tracer_provider = tracer_provider
    app.state.ticket_store = TicketStore()
    logger.info("%s started (%s)", settings.app_name, settings.environment)
    try:
        yield
    finally:
        app.state.ticket_store = None
        shutdown_tracer(tracer_provider)
        logger.info("%s stopped", settings.app_name)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.ticket_store = None
    app.state.tracer_provider = None
    app.state.metrics = register_default_metrics(MetricsRegistry())
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health.router)
    app.include_router(tickets.router)
    return app


app = create_app()
