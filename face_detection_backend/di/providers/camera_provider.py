from typing import TYPE_CHECKING
from ...domain.repositories.camera_repository import CameraRepository
from ...application.use_cases.camera.create_camera import CreateCameraUseCase
from ...application.use_cases.camera.list_cameras import ListCamerasUseCase
from ...application.use_cases.camera.get_camera import GetCameraUseCase
from ...application.use_cases.camera.update_camera import UpdateCameraUseCase
from ...application.use_cases.camera.delete_camera import DeleteCameraUseCase
from ...application.use_cases.camera.set_camera_streaming import SetCameraStreamingUseCase
from ...infrastructure.notifications.websocket_manager import WebSocketManager
from ...infrastructure.external.worker_client import ProcessingWorkerClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CameraProvider:
    """Camera use case provider - registers all camera-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all camera use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateCameraUseCase,
            lambda: CreateCameraUseCase(
                camera_repository=container.get(CameraRepository)
            )
        )

        container.register_factory(
            ListCamerasUseCase,
            lambda: ListCamerasUseCase(
                camera_repository=container.get(CameraRepository)
            )
        )

        container.register_factory(
            GetCameraUseCase,
            lambda: GetCameraUseCase(
                camera_repository=container.get(CameraRepository)
            )
        )

        container.register_factory(
            UpdateCameraUseCase,
            lambda: UpdateCameraUseCase(
                camera_repository=container.get(CameraRepository)
            )
        )

        container.register_factory(
            DeleteCameraUseCase,
            lambda: DeleteCameraUseCase(
                camera_repository=container.get(CameraRepository)
            )
        )

        container.register_factory(
            SetCameraStreamingUseCase,
            lambda: SetCameraStreamingUseCase(
                camera_repository=container.get(CameraRepository),
                websocket_manager=container.get(WebSocketManager),
                worker_client=container.get(ProcessingWorkerClient)
            )
        )
