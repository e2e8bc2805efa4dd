from .orm_models import Base, UserRecord, CameraRecord, AlertRecord
from .sql_connection import (
    create_db_engine,
    get_engine,
    get_session_factory,
    init_db,
    dispose_engine,
    check_connection,
    run_in_session,
)
from .sql_user_repository import SqlUserRepository
from .sql_camera_repository import SqlCameraRepository
from .sql_alert_repository import SqlAlertRepository

__all__ = [
    "Base",
    "UserRecord",
    "CameraRecord",
    "AlertRecord",
    "create_db_engine",
    "get_engine",
    "get_session_factory",
    "init_db",
    "dispose_engine",
    "check_connection",
    "run_in_session",
    "SqlUserRepository",
    "SqlCameraRepository",
    "SqlAlertRepository",
]
