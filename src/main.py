"""
Production FastAPI Application

Venue booking API with Postgres, Redis listing cache and background email delivery.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from dependency_injector import providers
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.platform.state.redis_client import redis_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Venue Booking] Starting up...')

    tracing = TracingConfig(service_name='venue-booking-service')
    tracing.setup()
    Logger.base.info('📊 [Venue Booking] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Venue Booking] Dependency injection wired')

    database = container.database()
    tracing.instrument_sqlalchemy(engine=database.engine)
    Logger.base.info('🗄️  [Venue Booking] Database engine ready + instrumented')

    tracing.instrument_redis()
    await redis_client.initialize()
    Logger.base.info('📡 [Venue Booking] Redis initialized')

    # Fire-and-forget email delivery runs on this task group
    async with anyio.create_task_group() as tg:
        container.task_group.override(providers.Object(tg))
        Logger.base.info('✅ [Venue Booking] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Venue Booking] Shutting down...')
        container.task_group.reset_override()
        tg.cancel_scope.cancel()

    await redis_client.disconnect()
    Logger.base.info('📡 [Venue Booking] Redis disconnected')

    await database.close()
    Logger.base.info('🗄️  [Venue Booking] Database engine disposed')

    tracing.shutdown()
    container.unwire()
    Logger.base.info('👋 [Venue Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
