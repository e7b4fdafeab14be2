from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class ReproductionOutcome(str, Enum):
    PREGNANT = "Preñada"
    NOT_PREGNANT = "No preñada"
    ABORTION = "Aborto"


@dataclass(slots=True)
class Reproduction:
    id: UUID
    dam_id: UUID
    sire_id: UUID | None = None
    mating_type: str | None = None  # Natural, artificial insemination; free text
    service_date: date | None = None
    pregnancy_confirmed_date: date | None = None
    expected_birth_date: date | None = None
    actual_birth_date: date | None = None
    outcome: str | None = None  # ReproductionOutcome, free text tolerated
    notes: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        dam_id: UUID,
        sire_id: UUID | None = None,
        mating_type: str | None = None,
        service_date: date | None = None,
        pregnancy_confirmed_date: date | None = None,
        expected_birth_date: date | None = None,
        actual_birth_date: date | None = None,
        outcome: str | None = None,
        notes: str | None = None,
    ) -> Reproduction:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            dam_id=dam_id,
            sire_id=sire_id,
            mating_type=mating_type,
            service_date=service_date,
            pregnancy_confirmed_date=pregnancy_confirmed_date,
            expected_birth_date=expected_birth_date,
            actual_birth_date=actual_birth_date,
            outcome=outcome,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    @property
    def confirms_pregnancy(self) -> bool:
        """A confirmation date counts unless a non-pregnant outcome was recorded."""
        if self.pregnancy_confirmed_date is None:
            return False
        return self.outcome is None or self.outcome == ReproductionOutcome.PREGNANT.value
