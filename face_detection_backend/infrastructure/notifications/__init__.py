"""Notifications infrastructure for the real-time dashboard channel"""

from .websocket_manager import WebSocketManager
from .notification_service import NotificationService

__all__ = [
    "WebSocketManager",
    "NotificationService",
]
