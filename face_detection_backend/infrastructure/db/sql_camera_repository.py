# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

# Local application imports
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.models.camera import Camera
from ...domain.constants import CameraFields
from ...utils.datetime_utils import ensure_utc
from .orm_models import AlertRecord, CameraRecord
from .sql_alert_repository import SqlAlertRepository
from .sql_connection import get_session_factory, run_in_session

_MUTABLE_FIELDS = set(CameraFields.UPDATABLE) | {CameraFields.IS_STREAMING}


class SqlCameraRepository(CameraRepository):
    """SQLAlchemy implementation of CameraRepository"""

    def __init__(self, session_factory: Optional[sessionmaker] = None) -> None:
        self.session_factory = session_factory if session_factory is not None else get_session_factory()

    @staticmethod
    def _owned(session: Session, camera_id: str, owner_user_id: str) -> Optional[CameraRecord]:
        return session.scalars(
            select(CameraRecord).where(
                CameraRecord.id == camera_id,
                CameraRecord.owner_user_id == owner_user_id,
            )
        ).first()

    async def find_by_id(
        self, camera_id: str, owner_user_id: str, recent_alerts_limit: int = 0
    ) -> Optional[Camera]:
        """
        Find a camera owned by the user

        Args:
            camera_id: The camera ID to find
            owner_user_id: The caller's user ID
            recent_alerts_limit: How many of the newest alerts to attach (0 for none)

        Returns:
            Camera domain model if found, None otherwise
        """
        if not camera_id or not owner_user_id:
            return None

        def _work(session: Session) -> Optional[Camera]:
            record = self._owned(session, camera_id, owner_user_id)
            if record is None:
                return None
            camera = self._record_to_camera(record)
            if recent_alerts_limit > 0:
                alert_records = session.scalars(
                    select(AlertRecord)
                    .where(AlertRecord.camera_id == record.id)
                    .order_by(AlertRecord.timestamp.desc())
                    .limit(recent_alerts_limit)
                ).all()
                camera.recent_alerts = [SqlAlertRepository.record_to_alert(a) for a in alert_records]
            return camera

        return await run_in_session(self.session_factory, _work)

    async def find_by_owner(self, owner_user_id: str) -> List[Camera]:
        """
        Find all cameras owned by a user with their alert counts

        Args:
            owner_user_id: The owner user ID

        Returns:
            List of Camera domain models, newest first
        """
        if not owner_user_id:
            return []

        def _work(session: Session) -> List[Camera]:
            rows = session.execute(
                select(CameraRecord, func.count(AlertRecord.id))
                .outerjoin(AlertRecord, AlertRecord.camera_id == CameraRecord.id)
                .where(CameraRecord.owner_user_id == owner_user_id)
                .group_by(CameraRecord.id)
                .order_by(CameraRecord.created_at.desc(), CameraRecord.id)
            ).all()
            cameras = []
            for record, alert_count in rows:
                camera = self._record_to_camera(record)
                camera.alert_count = alert_count
                cameras.append(camera)
            return cameras

        return await run_in_session(self.session_factory, _work)

    async def save(self, camera: Camera) -> Camera:
        """
        Insert a new camera

        Args:
            camera: Camera domain model to save (ID already generated)

        Returns:
            Saved Camera domain model with timestamps set
        """
        if not camera or not camera.id:
            raise ValueError("Camera with an ID is required")

        def _work(session: Session) -> Camera:
            record = CameraRecord(
                id=camera.id,
                name=camera.name,
                rtsp_url=camera.rtsp_url,
                location=camera.location,
                enabled=camera.enabled,
                is_streaming=camera.is_streaming,
                owner_user_id=camera.owner_user_id,
            )
            session.add(record)
            session.commit()
            session.refresh(record)
            return self._record_to_camera(record)

        return await run_in_session(self.session_factory, _work)

    async def update(
        self, camera_id: str, owner_user_id: str, changes: Dict[str, Any]
    ) -> Optional[Camera]:
        unknown = set(changes) - _MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported camera fields: {', '.join(sorted(unknown))}")

        def _work(session: Session) -> Optional[Camera]:
            record = self._owned(session, camera_id, owner_user_id)
            if record is None:
                return None
            for field_name, value in changes.items():
                setattr(record, field_name, value)
            # Re-run domain validations before committing
            self._record_to_camera(record)
            session.commit()
            session.refresh(record)
            return self._record_to_camera(record)

        return await run_in_session(self.session_factory, _work)

    async def delete(self, camera_id: str, owner_user_id: str) -> bool:
        def _work(session: Session) -> bool:
            record = self._owned(session, camera_id, owner_user_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
            return True

        return await run_in_session(self.session_factory, _work)

    async def count(self, is_streaming: Optional[bool] = None) -> int:
        def _work(session: Session) -> int:
            stmt = select(func.count(CameraRecord.id))
            if is_streaming is not None:
                stmt = stmt.where(CameraRecord.is_streaming == is_streaming)
            return session.scalar(stmt) or 0

        return await run_in_session(self.session_factory, _work)

    @staticmethod
    def _record_to_camera(record: CameraRecord) -> Camera:
        """
        Convert ORM record to Camera domain model

        Args:
            record: CameraRecord row

        Returns:
            Camera domain model
        """
        return Camera(
            id=record.id,
            owner_user_id=record.owner_user_id,
            name=record.name,
            rtsp_url=record.rtsp_url,
            location=record.location,
            enabled=record.enabled,
            is_streaming=record.is_streaming,
            created_at=ensure_utc(record.created_at),
            updated_at=ensure_utc(record.updated_at),
        )
