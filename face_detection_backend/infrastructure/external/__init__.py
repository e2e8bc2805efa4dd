"""External service clients for communicating with external systems"""

from .base_worker_client import BaseWorkerClient
from .worker_client import ProcessingWorkerClient

__all__ = [
    "BaseWorkerClient",
    "ProcessingWorkerClient",
]
