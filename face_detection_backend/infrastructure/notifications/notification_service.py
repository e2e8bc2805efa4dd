"""Notification Service for building real-time channel messages"""

import logging
from typing import Any, Dict

from ...domain.constants import MessageTypes
from ...utils.datetime_utils import now_iso

logger = logging.getLogger(__name__)

CONNECTION_GREETING = "connected to face detection dashboard"


class NotificationService:
    """
    Service for formatting domain events into ``{type, data}`` envelopes.

    Every ``data`` payload carries an ISO-8601 UTC ``timestamp`` taken when the
    message is built.
    """

    @staticmethod
    def build_message(message_type: str, data: Dict[str, Any]) -> Dict[str, Any]:
        if message_type not in MessageTypes.ALL:
            raise ValueError(f"Unknown message type: {message_type}")
        return {
            "type": message_type,
            "data": {**data, "timestamp": now_iso()},
        }

    @classmethod
    def connection_message(cls) -> Dict[str, Any]:
        return cls.build_message(MessageTypes.CONNECTION, {"message": CONNECTION_GREETING})

    @classmethod
    def camera_status_message(cls, camera_id: str, is_streaming: bool) -> Dict[str, Any]:
        """
        Format a camera streaming change.

        Args:
            camera_id: ID of the camera that changed
            is_streaming: New streaming flag

        Returns:
            ``camera_status`` envelope with cameraId, isStreaming and timestamp
        """
        return cls.build_message(
            MessageTypes.CAMERA_STATUS,
            {"cameraId": camera_id, "isStreaming": is_streaming},
        )

    @classmethod
    def alert_message(cls, alert: Dict[str, Any]) -> Dict[str, Any]:
        """The alert's own timestamp is kept as ``detectedAt``; ``timestamp`` is send time."""
        data = dict(alert)
        if "timestamp" in data:
            data["detectedAt"] = data.pop("timestamp")
        return cls.build_message(MessageTypes.NEW_ALERT, data)

    @classmethod
    def system_stats_message(cls, stats: Dict[str, Any]) -> Dict[str, Any]:
        return cls.build_message(MessageTypes.SYSTEM_STATS, stats)
