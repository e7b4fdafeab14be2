from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ganado.application.errors import ConflictError
from ganado.application.interfaces.repositories.animals import AnimalRepository
from ganado.domain.models.animal import Animal
from ganado.infrastructure.db.orm.animal import AnimalORM


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            tag=orm.tag,
            birth_date=orm.birth_date,
            sex=orm.sex,
            name=orm.name,
            breed=orm.breed,
            status=orm.status,
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            birth_reproduction_id=orm.birth_reproduction_id,
            category=orm.category,
            active=orm.active,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            tag=animal.tag,
            birth_date=animal.birth_date,
            sex=animal.sex,
            name=animal.name,
            breed=animal.breed,
            status=animal.status,
            sire_id=animal.sire_id,
            dam_id=animal.dam_id,
            birth_reproduction_id=animal.birth_reproduction_id,
            category=animal.category,
            active=animal.active,
            notes=animal.notes,
            created_at=animal.created_at,
            updated_at=animal.updated_at,
            version=animal.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Animal tag already exists") from exc
        return self._to_domain(orm)

    async def get(self, animal_id: UUID) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.id == animal_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_offspring(self, reproduction_id: UUID) -> list[Animal]:
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.birth_reproduction_id == reproduction_id)
            .order_by(AnimalORM.birth_date, AnimalORM.tag)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(
        self,
        animal_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Animal | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.version == expected_version)
            .values(**values)
            .returning(AnimalORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def set_category(self, animal_id: UUID, category: str) -> None:
        stmt = update(AnimalORM).where(AnimalORM.id == animal_id).values(category=category)
        await self.session.execute(stmt)

    async def deactivate(self, animal_id: UUID) -> bool:
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.active.is_(True))
            .values(active=False, version=AnimalORM.version + 1)
            .returning(AnimalORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
