"""Constants for Camera model field names"""


class CameraFields:
    """Field name constants for Camera model"""
    ID = "id"
    OWNER_USER_ID = "owner_user_id"
    NAME = "name"
    RTSP_URL = "rtsp_url"
    LOCATION = "location"
    ENABLED = "enabled"
    IS_STREAMING = "is_streaming"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # Fields a client may change through an update request
    UPDATABLE = (NAME, RTSP_URL, LOCATION, ENABLED)
