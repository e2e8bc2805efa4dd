# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
import httpx

# Local application imports
from .base_worker_client import BaseWorkerClient
from ...domain.models.camera import Camera

logger = logging.getLogger(__name__)


class ProcessingWorkerClient(BaseWorkerClient):
    """
    HTTP client for the face detection processing worker.

    The worker pulls the RTSP stream and posts alerts back to ``/api/alerts``.
    This client only tells it which cameras to start and stop. Failures are
    logged and reported as ``False`` so a worker outage never blocks a
    streaming state change.
    """

    async def start_processing(self, camera: Camera) -> bool:
        """
        Ask the worker to begin face detection on a camera stream.

        Args:
            camera: Camera whose stream should be processed

        Returns:
            True if the worker accepted the request, False otherwise
        """
        if not self.is_configured:
            logger.info(f"No processing worker configured, would start processing for camera {camera.id}")
            return False

        payload = {"id": camera.id, "name": camera.name, "rtspUrl": camera.rtsp_url}
        return await self._post(f"/cameras/{camera.id}/start", payload, action="start", camera_id=camera.id)

    async def stop_processing(self, camera: Camera) -> bool:
        """
        Ask the worker to stop processing a camera stream.

        Args:
            camera: Camera whose processing should stop

        Returns:
            True if the worker accepted the request, False otherwise
        """
        if not self.is_configured:
            logger.info(f"No processing worker configured, would stop processing for camera {camera.id}")
            return False

        return await self._post(f"/cameras/{camera.id}/stop", None, action="stop", camera_id=camera.id)

    async def _post(
        self,
        path: str,
        payload: Optional[Dict[str, Any]],
        action: str,
        camera_id: str,
    ) -> bool:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                logger.info(f"Requesting worker {action} for camera {camera_id} at {self.base_url}")
                response = await client.post(f"{self.base_url}{path}", json=payload)
                response.raise_for_status()
                logger.info(f"Worker accepted {action} for camera {camera_id}")
                return True
            except httpx.TimeoutException:
                logger.error(f"Timeout while requesting worker {action} for camera {camera_id}")
                return False
            except httpx.HTTPStatusError as e:
                logger.error(
                    f"HTTP error requesting worker {action} for camera {camera_id}: "
                    f"{e.response.status_code} - {e.response.text}"
                )
                return False
            except Exception as e:
                logger.error(
                    f"Unexpected error requesting worker {action} for camera {camera_id}: {e}",
                    exc_info=True
                )
                return False
