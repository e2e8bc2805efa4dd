# Standard library imports
import logging
from typing import Optional

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)


class BaseWorkerClient:
    """
    Base class for processing worker clients.

    Provides common initialization for base_url and timeout. An empty
    base_url means no worker is deployed and calls become no-ops.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize base worker client.

        Args:
            base_url: Base URL for the processing worker. If None, reads from env.
            timeout: Request timeout in seconds. If None, reads from env.
        """
        settings = get_settings()
        self.base_url = (base_url if base_url is not None else settings.processing_worker_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.processing_worker_timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url)
