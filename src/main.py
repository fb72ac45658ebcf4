"""
Production FastAPI Application

MongoDB-backed booking API plus the realtime notification stream.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
import uvicorn

from src.platform.app_factory import SERVICE_NAME, create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Booking Service] Starting up...')

    tracing = TracingConfig(service_name=SERVICE_NAME)
    tracing.setup()
    Logger.base.info('📊 [Booking Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Booking Service] Dependency injection wired')

    # Fail fast when the document store is unreachable
    database = container.mongo_database()
    try:
        await database.ping()
        await database.ensure_indexes()
    except PersistenceError:
        await database.close()
        container.unwire()
        raise
    Logger.base.info(f'🗄️  [Booking Service] MongoDB ready ({database.db_name})')

    notification_channel = container.notification_channel()

    # Task group owns the fire-and-forget realtime deliveries
    async with anyio.create_task_group() as tg:
        notification_channel.open(task_group=tg)
        Logger.base.info('✅ [Booking Service] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Booking Service] Shutting down...')
        await notification_channel.close()
        tg.cancel_scope.cancel()

    await database.close()
    Logger.base.info('🗄️  [Booking Service] MongoDB client closed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Booking Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')


if __name__ == '__main__':
    uvicorn.run('src.main:app', host='0.0.0.0', port=settings.PORT, reload=settings.DEBUG)
