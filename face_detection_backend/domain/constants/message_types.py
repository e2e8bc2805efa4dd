"""Constants for real-time channel message types"""


class MessageTypes:
    """``type`` values of the ``{type, data}`` envelopes pushed to dashboards"""
    CONNECTION = "connection"
    CAMERA_STATUS = "camera_status"
    NEW_ALERT = "new_alert"
    SYSTEM_STATS = "system_stats"

    ALL = (CONNECTION, CAMERA_STATUS, NEW_ALERT, SYSTEM_STATS)
