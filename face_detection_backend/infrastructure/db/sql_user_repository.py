# Standard library imports
from typing import Optional

# External package imports
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...utils.datetime_utils import ensure_utc
from .orm_models import UserRecord
from .sql_connection import get_session_factory, run_in_session


class SqlUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository"""

    def __init__(self, session_factory: Optional[sessionmaker] = None) -> None:
        self.session_factory = session_factory if session_factory is not None else get_session_factory()

    async def find_by_username(self, username: str) -> Optional[User]:
        if not username:
            return None

        def _work(session: Session) -> Optional[User]:
            record = session.scalars(
                select(UserRecord).where(UserRecord.username == username)
            ).first()
            return self._record_to_user(record) if record else None

        return await run_in_session(self.session_factory, _work)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None

        def _work(session: Session) -> Optional[User]:
            record = session.get(UserRecord, user_id)
            return self._record_to_user(record) if record else None

        return await run_in_session(self.session_factory, _work)

    async def save(self, user: User) -> User:
        """
        Insert a new user

        Raises:
            ValueError: If user is missing its ID
        """
        if not user or not user.id:
            raise ValueError("User with an ID is required")

        def _work(session: Session) -> User:
            record = UserRecord(
                id=user.id,
                username=user.username,
                hashed_password=user.hashed_password,
            )
            session.add(record)
            session.commit()
            session.refresh(record)
            return self._record_to_user(record)

        return await run_in_session(self.session_factory, _work)

    @staticmethod
    def _record_to_user(record: UserRecord) -> User:
        return User(
            id=record.id,
            username=record.username,
            hashed_password=record.hashed_password,
            created_at=ensure_utc(record.created_at),
        )
