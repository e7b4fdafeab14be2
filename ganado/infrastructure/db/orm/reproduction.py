from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, Index, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ganado.infrastructure.db.base import Base


class ReproductionORM(Base):
    __tablename__ = "reproductions"
    __table_args__ = (
        Index("ix_reproductions_dam_birth", "dam_id", "actual_birth_date"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    dam_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    sire_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    mating_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    service_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    pregnancy_confirmed_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    expected_birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    actual_birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    outcome: Mapped[str | None] = mapped_column(String(50), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
