from typing import TYPE_CHECKING
from ...infrastructure.notifications import NotificationService, WebSocketManager
from ...infrastructure.external.worker_client import ProcessingWorkerClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class NotificationProvider:
    """Shared service provider - the dashboard WebSocket manager and the processing worker client"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register shared services as singletons.
        Every use case and the WebSocket endpoint must see the same manager.
        """
        try:
            container.get(WebSocketManager)
        except ValueError:
            container.register_singleton(
                WebSocketManager,
                WebSocketManager(notification_service=NotificationService())
            )

        try:
            container.get(ProcessingWorkerClient)
        except ValueError:
            container.register_singleton(ProcessingWorkerClient, ProcessingWorkerClient())
