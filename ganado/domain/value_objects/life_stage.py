from __future__ import annotations

from enum import Enum


class LifeStage(str, Enum):
    BULL = "Toro"
    FRESH_PREGNANT = "Parida preñada"
    FRESH_OPEN = "Parida vacía"
    PREGNANT = "Preñada"
    CALF = "Becerro"
    WEANED_HEIFER = "Novillas destete"
    WEANED_STEER = "Novillos destete"
    GROWING_HEIFER = "Novillas levante"
    GROWING_STEER = "Novillos levante"
    BREEDING_HEIFER = "Novillas vientre"
    FATTENING_STEER = "Novillos ceba"
    OPEN_COW = "Vacía"


# Upper bound (inclusive, in days of age) for each age band
CALF_MAX_DAYS = 240
WEANED_MAX_DAYS = 365
GROWING_MAX_DAYS = 600
YOUNG_MAX_DAYS = 1080

RECENT_BIRTH_MONTHS = 8
