from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.repositories.alert_repository import AlertRepository
from ...infrastructure.db.sql_user_repository import SqlUserRepository
from ...infrastructure.db.sql_camera_repository import SqlCameraRepository
from ...infrastructure.db.sql_alert_repository import SqlAlertRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the session factory from database provider and creates repository instances.
        """
        session_factory = container.get("session_factory")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            SqlUserRepository(session_factory=session_factory)
        )

        container.register_singleton(
            CameraRepository,
            SqlCameraRepository(session_factory=session_factory)
        )

        container.register_singleton(
            AlertRepository,
            SqlAlertRepository(session_factory=session_factory)
        )
