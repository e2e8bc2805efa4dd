"""WebSocket Manager for tracking dashboard connections and broadcasting status updates"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Set
from threading import Lock
import json

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from .notification_service import NotificationService

logger = logging.getLogger(__name__)

SEND_TIMEOUT_SECONDS = 2.0


class WebSocketManager:
    """
    Holds the set of open dashboard connections and fans messages out to them.

    Connections are added by the accept path and removed by disconnect
    handlers, both of which can interleave with a broadcast. A broadcast
    sends to a snapshot concurrently, never raises on a stale connection, and
    evicts any connection found closed, failing or too slow during the same pass.
    """

    def __init__(
        self,
        notification_service: NotificationService = None,
        send_timeout: Optional[float] = None,
    ):
        """Initialize WebSocket manager"""
        self._connections: Set[WebSocket] = set()
        self._lock = Lock()
        self._running = False
        self.notification_service = notification_service or NotificationService()
        self.send_timeout = SEND_TIMEOUT_SECONDS if send_timeout is None else send_timeout
        logger.info("WebSocketManager initialized")

    @staticmethod
    def is_open(websocket: WebSocket) -> bool:
        """True while both sides of the connection are still connected"""
        return (
            websocket.client_state == WebSocketState.CONNECTED
            and websocket.application_state == WebSocketState.CONNECTED
        )

    def mark_running(self) -> None:
        self._running = True

    async def add_connection(self, websocket: WebSocket) -> None:
        """
        Register an accepted connection and greet it with a ``connection`` message.

        Args:
            websocket: WebSocket connection instance (already accepted)
        """
        with self._lock:
            self._connections.add(websocket)

        logger.info(f"New WebSocket client connected. Total clients: {self.get_total_connections()}")

        greeting = self.notification_service.connection_message()
        if not await self._send(websocket, json.dumps(greeting)):
            await self.remove_connection(websocket)

    async def remove_connection(self, websocket: WebSocket) -> None:
        """
        Forget a connection. Safe to call more than once.

        Args:
            websocket: WebSocket connection instance
        """
        with self._lock:
            if websocket not in self._connections:
                return
            self._connections.discard(websocket)

        logger.info(f"WebSocket client disconnected. Total clients: {self.get_total_connections()}")

    async def _send(self, websocket: WebSocket, message_json: str) -> bool:
        if not self.is_open(websocket):
            return False
        try:
            await asyncio.wait_for(websocket.send_text(message_json), timeout=self.send_timeout)
            return True
        except asyncio.TimeoutError:
            logger.warning(f"WebSocket client did not accept message within {self.send_timeout}s")
            return False
        except Exception as e:
            logger.warning(f"Failed to send message to WebSocket client: {e}")
            return False

    async def broadcast(self, message: Dict[str, Any]) -> int:
        """
        Send a message to every open connection.

        Args:
            message: ``{type, data}`` envelope (will be JSON serialized)

        Returns:
            Number of connections the message was successfully sent to
        """
        try:
            message_json = json.dumps(message)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize message to JSON: {e}")
            return 0

        with self._lock:
            connections = list(self._connections)

        results = await asyncio.gather(
            *(self._send(websocket, message_json) for websocket in connections)
        )
        sent_count = sum(1 for delivered in results if delivered)
        stale: List[WebSocket] = [
            websocket for websocket, delivered in zip(connections, results) if not delivered
        ]

        if stale:
            with self._lock:
                for websocket in stale:
                    self._connections.discard(websocket)
            logger.info(f"Evicted {len(stale)} inactive WebSocket client(s)")

        if sent_count > 0:
            logger.debug(f"Broadcast '{message.get('type')}' to {sent_count} client(s)")
        return sent_count

    async def broadcast_camera_status(self, camera_id: str, is_streaming: bool) -> int:
        """Send a ``camera_status`` update to all dashboards"""
        return await self.broadcast(
            self.notification_service.camera_status_message(camera_id, is_streaming)
        )

    async def broadcast_alert(self, alert: Dict[str, Any]) -> int:
        """Send a ``new_alert`` notification to all dashboards"""
        return await self.broadcast(self.notification_service.alert_message(alert))

    async def broadcast_system_stats(self, stats: Dict[str, Any]) -> int:
        """Send ``system_stats`` to all dashboards"""
        return await self.broadcast(self.notification_service.system_stats_message(stats))

    def get_total_connections(self) -> int:
        """
        Get total number of tracked WebSocket connections.

        Returns:
            Number of connections, including ones not yet found stale
        """
        with self._lock:
            return len(self._connections)

    def ping_clients(self) -> Dict[str, int]:
        """
        Count tracked connections by state without sending anything.

        Returns:
            Dictionary with total, active and inactive counts
        """
        with self._lock:
            connections = list(self._connections)
        active = sum(1 for websocket in connections if self.is_open(websocket))
        return {
            "total": len(connections),
            "active": active,
            "inactive": len(connections) - active,
        }

    def get_server_status(self) -> Dict[str, bool]:
        return {"running": self._running}

    async def shutdown(self) -> None:
        """Close every connection and stop reporting the channel as running"""
        with self._lock:
            connections = list(self._connections)
            self._connections.clear()
        self._running = False

        for websocket in connections:
            if not self.is_open(websocket):
                continue
            try:
                await websocket.close(code=1001, reason="Server shutting down")
            except Exception as e:
                logger.debug(f"Error closing WebSocket during shutdown: {e}")

        logger.info(f"WebSocket channel shut down, closed {len(connections)} connection(s)")
