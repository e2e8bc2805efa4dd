"""SQLAlchemy table mappings. Domain models stay free of ORM concerns."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import declarative_base, relationship

from ...utils.datetime_utils import utc_now

Base = declarative_base()


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    cameras = relationship("CameraRecord", back_populates="owner", cascade="all, delete-orphan")


class CameraRecord(Base):
    __tablename__ = "cameras"

    id = Column(String(32), primary_key=True)
    name = Column(String(100), nullable=False)
    rtsp_url = Column(String(2048), nullable=False)
    location = Column(String(200), nullable=True)
    enabled = Column(Boolean, default=True, nullable=False)
    is_streaming = Column(Boolean, default=False, nullable=False)
    owner_user_id = Column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    owner = relationship("UserRecord", back_populates="cameras")
    alerts = relationship(
        "AlertRecord",
        back_populates="camera",
        cascade="all, delete-orphan",
    )


class AlertRecord(Base):
    __tablename__ = "alerts"

    id = Column(String(32), primary_key=True)
    camera_id = Column(
        String(32), ForeignKey("cameras.id", ondelete="CASCADE"), index=True, nullable=False
    )
    timestamp = Column(DateTime(timezone=True), default=utc_now, index=True, nullable=False)
    face_count = Column(Integer, default=1, nullable=False)
    confidence = Column(Float, nullable=True)
    snapshot_url = Column(String(2048), nullable=True)
    # "metadata" is reserved on declarative classes
    alert_metadata = Column("metadata", JSON, nullable=True)

    camera = relationship("CameraRecord", back_populates="alerts")
