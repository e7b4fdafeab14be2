from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ganado.domain.models.reproduction import Reproduction
from ganado.infrastructure.db.orm.reproduction import ReproductionORM


class ReproductionsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ReproductionORM) -> Reproduction:
        return Reproduction(
            id=orm.id,
            dam_id=orm.dam_id,
            sire_id=orm.sire_id,
            mating_type=orm.mating_type,
            service_date=orm.service_date,
            pregnancy_confirmed_date=orm.pregnancy_confirmed_date,
            expected_birth_date=orm.expected_birth_date,
            actual_birth_date=orm.actual_birth_date,
            outcome=orm.outcome,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, reproduction: Reproduction) -> Reproduction:
        orm = ReproductionORM(
            id=reproduction.id,
            dam_id=reproduction.dam_id,
            sire_id=reproduction.sire_id,
            mating_type=reproduction.mating_type,
            service_date=reproduction.service_date,
            pregnancy_confirmed_date=reproduction.pregnancy_confirmed_date,
            expected_birth_date=reproduction.expected_birth_date,
            actual_birth_date=reproduction.actual_birth_date,
            outcome=reproduction.outcome,
            notes=reproduction.notes,
            created_at=reproduction.created_at,
            updated_at=reproduction.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, reproduction_id: UUID) -> Reproduction | None:
        orm = await self.session.get(ReproductionORM, reproduction_id)
        return self._to_domain(orm) if orm else None

    async def list_for_dam(self, dam_id: UUID) -> list[Reproduction]:
        # Most recent birth first, events without a birth last
        stmt = (
            select(ReproductionORM)
            .where(ReproductionORM.dam_id == dam_id)
            .order_by(
                ReproductionORM.actual_birth_date.is_(None),
                ReproductionORM.actual_birth_date.desc(),
                ReproductionORM.service_date,
            )
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, reproduction_id: UUID, data: dict) -> Reproduction | None:
        stmt = (
            update(ReproductionORM)
            .where(ReproductionORM.id == reproduction_id)
            .values(**data)
            .returning(ReproductionORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, reproduction_id: UUID) -> bool:
        # Calves keep their birth_reproduction_id; it is a weak reference
        stmt = (
            delete(ReproductionORM)
            .where(ReproductionORM.id == reproduction_id)
            .returning(ReproductionORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
