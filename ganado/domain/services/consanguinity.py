from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Decimal
from uuid import UUID

DEFAULT_MAX_GENERATION = 5

_PERCENT = Decimal(100)
_TWO_PLACES = Decimal("0.01")


@dataclass(slots=True)
class AncestorCensus:
    """Occurrences and closest generation of every id reached by an ancestor walk."""

    occurrences: Counter[UUID] = field(default_factory=Counter)
    min_generation: dict[UUID, int] = field(default_factory=dict)

    def record(self, animal_id: UUID, generation: int) -> None:
        self.occurrences[animal_id] += 1
        current = self.min_generation.get(animal_id)
        if current is None or generation < current:
            self.min_generation[animal_id] = generation

    def shared_ancestors(self) -> dict[UUID, int]:
        """Ids reached through more than one path, mapped to their closest generation."""
        return {
            animal_id: self.min_generation[animal_id]
            for animal_id, count in self.occurrences.items()
            if count > 1
        }


def score_census(census: AncestorCensus) -> Decimal:
    """Simplified inbreeding proxy, as a percentage with two decimals.

    Each shared ancestor adds 1 / 2^(g + 1) where g is the closest generation at
    which it appears. This is not Wright's coefficient.
    """
    shared = census.shared_ancestors()
    if not shared:
        return Decimal(0)
    total = sum((Decimal(1) / Decimal(2 ** (g + 1)) for g in shared.values()), Decimal(0))
    return (total * _PERCENT).quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN)
