"""Domain exceptions raised by use cases and mapped to HTTP errors by the API layer."""


class CameraNotFoundError(ValueError):
    """Raised when a camera does not exist or belongs to another user."""

    def __init__(self, message: str = "Camera not found"):
        super().__init__(message)


class AuthenticationError(ValueError):
    """Raised when a token or credential cannot be accepted."""
    pass
