"""
Desk Booker - FastAPI Application

Books desks for people on given dates and lists desks and bookings.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Desk Booker] Starting up...')

    tracing = TracingConfig(service_name='desk-booker')
    tracing.setup()
    Logger.base.info('📊 [Desk Booker] OpenTelemetry tracing configured')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Desk Booker] Dependency injection wired')

    tracing.instrument_sqlalchemy(engine=get_engine())
    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()
    Logger.base.info('🗄️  [Desk Booker] Database engine ready + instrumented')

    Logger.base.info('✅ [Desk Booker] Startup complete')

    yield

    Logger.base.info('🛑 [Desk Booker] Shutting down...')

    await dispose_engine()
    tracing.shutdown()
    container.unwire()
    cleanup()

    Logger.base.info('👋 [Desk Booker] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
