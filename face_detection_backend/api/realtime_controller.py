"""Dashboard WebSocket endpoint for real-time camera status and alert updates"""

import logging
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..infrastructure.notifications import WebSocketManager
from ..di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])


@router.websocket("/")
async def dashboard_websocket(websocket: WebSocket):
    """
    WebSocket endpoint for the dashboard.

    Every connected client receives every broadcast (``camera_status``,
    ``new_alert``, ``system_stats``). The only inbound message understood is a
    text ``ping``, answered with ``pong``; the dashboard uses it as a keepalive.

    Example connection:
        ws://host:8000/
    """
    manager: WebSocketManager = get_container().get(WebSocketManager)

    await websocket.accept()
    await manager.add_connection(websocket)

    try:
        while True:
            message = await websocket.receive_text()
            if message == "ping":
                await websocket.send_text("pong")
            else:
                logger.debug(f"Ignoring WebSocket message: {message[:100]}")
    except WebSocketDisconnect:
        logger.debug("WebSocket client disconnected")
    except Exception as e:
        logger.warning(f"WebSocket connection error: {e}")
    finally:
        await manager.remove_connection(websocket)
