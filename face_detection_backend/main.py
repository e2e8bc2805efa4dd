# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging
import asyncio

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api import auth_controller, camera_controller, alert_controller, health_controller, realtime_controller
from .api.errors import register_exception_handlers
from .application.use_cases.system.collect_system_stats import CollectSystemStatsUseCase
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container
from .infrastructure.db.sql_connection import init_db, dispose_engine
from .infrastructure.notifications import WebSocketManager

logger = logging.getLogger(__name__)


async def broadcast_system_stats_periodically(interval_seconds: float) -> None:
    """
    Background task that pushes ``system_stats`` to the dashboards.

    Nothing is collected while no client is connected. Errors in one round
    are logged and the loop carries on with the next one.
    """
    container = get_container()
    manager: WebSocketManager = container.get(WebSocketManager)

    logger.info(f"System stats broadcaster started (every {interval_seconds}s)")

    while True:
        try:
            await asyncio.sleep(interval_seconds)
            if manager.get_total_connections() == 0:
                continue

            stats = await container.get(CollectSystemStatsUseCase).execute()
            await manager.broadcast_system_stats(stats)

        except asyncio.CancelledError:
            logger.info("System stats broadcaster cancelled")
            break
        except Exception as e:
            logger.error(f"Error broadcasting system stats: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the database schema, marks the WebSocket channel as running and
    starts the periodic system stats task.
    """
    settings = get_settings()

    await asyncio.to_thread(init_db)

    manager: WebSocketManager = get_container().get(WebSocketManager)
    manager.mark_running()
    logger.info("WebSocket channel ready at /")

    stats_task: Optional[asyncio.Task] = None
    if settings.system_stats_interval_seconds > 0:
        stats_task = asyncio.create_task(
            broadcast_system_stats_periodically(settings.system_stats_interval_seconds)
        )

    yield

    # Shutdown: Stop background tasks and services
    if stats_task:
        stats_task.cancel()
        try:
            await stats_task
        except asyncio.CancelledError:
            pass
        logger.info("System stats broadcaster stopped")

    try:
        await manager.shutdown()
    except Exception as e:
        logger.error(f"Error shutting down WebSocket channel: {e}", exc_info=True)

    dispose_engine()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route and error handler registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Face Detection Backend API",
        version=health_controller.SERVICE_VERSION,
        description="Camera management and real-time alert backend for face detection",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(auth_controller.router, prefix="/api/auth")
    application.include_router(camera_controller.router, prefix="/api/cameras")
    application.include_router(alert_controller.router, prefix="/api/alerts")
    application.include_router(health_controller.router)
    application.include_router(realtime_controller.router)

    return application


# Create application instance
app = create_application()
