from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Animal:
    id: UUID
    tag: str
    birth_date: date
    sex: str
    name: str | None = None
    breed: str | None = None
    status: str | None = None

    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    # Reproduction event this animal was born from
    birth_reproduction_id: UUID | None = None

    # Cached life-stage classification
    category: str | None = None
    active: bool = True
    notes: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        tag: str,
        birth_date: date,
        sex: str,
        name: str | None = None,
        breed: str | None = None,
        status: str | None = None,
        sire_id: UUID | None = None,
        dam_id: UUID | None = None,
        birth_reproduction_id: UUID | None = None,
        notes: str | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            tag=tag,
            birth_date=birth_date,
            sex=sex,
            name=name,
            breed=breed,
            status=status,
            sire_id=sire_id,
            dam_id=dam_id,
            birth_reproduction_id=birth_reproduction_id,
            notes=notes,
            active=True,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def is_own_parent(self) -> bool:
        return self.id in (self.sire_id, self.dam_id)

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
