# Standard library imports
from typing import List, Optional, Tuple

# External package imports
from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

# Local application imports
from ...domain.repositories.alert_repository import AlertRepository
from ...domain.models.alert import Alert
from ...utils.datetime_utils import ensure_utc
from .orm_models import AlertRecord, CameraRecord
from .sql_connection import get_session_factory, run_in_session


class SqlAlertRepository(AlertRepository):
    """SQLAlchemy implementation of AlertRepository"""

    def __init__(self, session_factory: Optional[sessionmaker] = None) -> None:
        self.session_factory = session_factory if session_factory is not None else get_session_factory()

    async def save(self, alert: Alert) -> Alert:
        if not alert or not alert.id:
            raise ValueError("Alert with an ID is required")

        def _work(session: Session) -> Alert:
            record = AlertRecord(
                id=alert.id,
                camera_id=alert.camera_id,
                face_count=alert.face_count,
                confidence=alert.confidence,
                snapshot_url=alert.snapshot_url,
                alert_metadata=alert.metadata,
            )
            if alert.timestamp is not None:
                record.timestamp = alert.timestamp
            session.add(record)
            session.commit()
            session.refresh(record)
            return self.record_to_alert(record)

        return await run_in_session(self.session_factory, _work)

    async def find_by_camera(
        self, camera_id: str, owner_user_id: str, limit: int, skip: int = 0
    ) -> Tuple[int, List[Alert]]:
        def _work(session: Session) -> Tuple[int, List[Alert]]:
            scope = (
                AlertRecord.camera_id == camera_id,
                CameraRecord.owner_user_id == owner_user_id,
            )
            total = session.scalar(
                select(func.count(AlertRecord.id))
                .select_from(AlertRecord)
                .join(CameraRecord)
                .where(*scope)
            ) or 0
            records = session.scalars(
                select(AlertRecord)
                .join(CameraRecord)
                .where(*scope)
                .order_by(AlertRecord.timestamp.desc(), AlertRecord.id)
                .offset(skip)
                .limit(limit)
            ).all()
            return total, [self.record_to_alert(record) for record in records]

        return await run_in_session(self.session_factory, _work)

    async def count(self, camera_id: Optional[str] = None) -> int:
        def _work(session: Session) -> int:
            stmt = select(func.count(AlertRecord.id))
            if camera_id is not None:
                stmt = stmt.where(AlertRecord.camera_id == camera_id)
            return session.scalar(stmt) or 0

        return await run_in_session(self.session_factory, _work)

    @staticmethod
    def record_to_alert(record: AlertRecord) -> Alert:
        return Alert(
            id=record.id,
            camera_id=record.camera_id,
            face_count=record.face_count,
            confidence=record.confidence,
            snapshot_url=record.snapshot_url,
            metadata=record.alert_metadata,
            timestamp=ensure_utc(record.timestamp),
        )
