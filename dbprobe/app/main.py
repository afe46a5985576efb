from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from dbprobe.app.composition import create_probe_dependencies
from dbprobe.app.config.settings import Settings
from dbprobe.app.core import SERVICE_NAME
from dbprobe.app.core.logging import configure_logging
from dbprobe.app.routers.health import health_router
from dbprobe.app.routers.probe import probe_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    configure_logging(settings)
    logger.bind(service_name=SERVICE_NAME, event="api_starting").info("")

    # Every request gets its own dependencies so no state crosses probes.
    app.state.settings = settings
    app.state.probe_service_factory = lambda: create_probe_dependencies(settings).service
    try:
        yield
    finally:
        logger.bind(service_name=SERVICE_NAME, event="api_stopping").info("")


app = FastAPI(
    title="Database Readiness Probe",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(probe_router)
