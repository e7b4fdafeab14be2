from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    FEMALE = "H"  # Hembra
    MALE = "M"  # Macho

    @classmethod
    def normalize(cls, value: str | None) -> Sex | None:
        """Map a stored sex code to a Sex, or None when it is not recognized."""
        code = (value or "").strip().upper()
        for member in cls:
            if member.value == code:
                return member
        return None
