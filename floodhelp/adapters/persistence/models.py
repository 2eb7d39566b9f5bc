"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

import uuid
from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from floodhelp.adapters.persistence.database import Base


class ReportModel(Base):
    __tablename__ = "reports"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    lastname: Mapped[str | None] = mapped_column(Text, nullable=True)
    raw_message: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    location_lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    location_long: Mapped[float | None] = mapped_column(Float, nullable=True)
    phone: Mapped[list[str]] = mapped_column(ARRAY(Text), nullable=False, default=list)
    number_of_adults: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_children: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_seniors: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    health_condition: Mapped[str | None] = mapped_column(Text, nullable=True)
    help_needed: Mapped[str | None] = mapped_column(Text, nullable=True)
    urgency_level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        CheckConstraint("urgency_level >= 1 AND urgency_level <= 5", name="ck_reports_urgency"),
        Index("idx_reports_urgency", "urgency_level"),
        Index("idx_reports_status", "status"),
        Index("idx_reports_created_at", "created_at"),
    )
