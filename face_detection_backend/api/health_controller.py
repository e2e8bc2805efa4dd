# Standard library imports
import asyncio
import time
from typing import Any, Dict

# External package imports
from fastapi import APIRouter

# Local application imports
from ..core.config import get_settings
from ..infrastructure.db.sql_connection import check_connection
from ..infrastructure.notifications.websocket_manager import WebSocketManager
from ..di.container import get_container
from ..utils.datetime_utils import now_iso


router = APIRouter(tags=["health"])

SERVICE_NAME = "Face Detection Backend API"
SERVICE_VERSION = "1.0.0"

_process_started_at = time.monotonic()


def _websocket_manager() -> WebSocketManager:
    return get_container().get(WebSocketManager)


@router.get("/")
async def service_info() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "message": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "status": "running",
        "websocket": f"ws://localhost:{settings.port}",
    }


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Report database connectivity, WebSocket channel state and uptime.

    Always answers 200; a failing dependency shows up in ``services``.
    """
    db_connected = await asyncio.to_thread(check_connection)
    manager = _websocket_manager()
    ws_running = manager.get_server_status()["running"]
    ws_health = manager.ping_clients()

    database_status = "connected" if db_connected else "disconnected"
    return {
        "status": "ok",
        "timestamp": now_iso(),
        "services": {
            "database": {
                "status": database_status,
                "connected": db_connected,
            },
            "websocket": {
                "status": "running" if ws_running else "stopped",
                "server_running": ws_running,
                "clients_total": ws_health["total"],
                "clients_active": ws_health["active"],
                "clients_inactive": ws_health["inactive"],
            },
            "api": {
                "status": "running",
                "uptime": round(time.monotonic() - _process_started_at, 3),
            },
        },
        # Flat fields kept for older dashboards
        "database": database_status,
        "websocket": (
            f"{ws_health['active']}/{ws_health['total']} clients active"
            if ws_running
            else "WebSocket server not running"
        ),
    }


@router.get("/health/websocket")
async def websocket_health() -> Dict[str, Any]:
    manager = _websocket_manager()
    ws_health = manager.ping_clients()
    return {
        "websocket": {
            "server_running": manager.get_server_status()["running"],
            "clients_total": ws_health["total"],
            "clients_active": ws_health["active"],
            "clients_inactive": ws_health["inactive"],
            "last_check": now_iso(),
        }
    }
