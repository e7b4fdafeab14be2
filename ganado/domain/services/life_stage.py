"""Life-stage (production category) classification.

Categories are derived fresh from age, sex and the dam's reproductive history
every time an animal is written; nothing here keeps state between calls.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from ganado.domain.models.animal import Animal
from ganado.domain.models.reproduction import Reproduction
from ganado.domain.value_objects.life_stage import (
    CALF_MAX_DAYS,
    GROWING_MAX_DAYS,
    RECENT_BIRTH_MONTHS,
    WEANED_MAX_DAYS,
    YOUNG_MAX_DAYS,
    LifeStage,
)
from ganado.domain.value_objects.sex import Sex
from ganado.utils.datetime_tz import civil_date, subtract_months


@dataclass(slots=True, frozen=True)
class ReproductiveFacts:
    is_confirmed_pregnant: bool = False
    last_birth: Reproduction | None = None
    had_recent_birth: bool = False
    has_registered_offspring: bool = False
    pregnant_after_birth: bool = False


NO_REPRODUCTIVE_FACTS = ReproductiveFacts()


def find_last_birth(history: Sequence[Reproduction]) -> Reproduction | None:
    """Most recent event with an actual birth date (first one wins on ties)."""
    last: Reproduction | None = None
    for event in history:
        if event.actual_birth_date is None:
            continue
        if last is None or event.actual_birth_date > last.actual_birth_date:
            last = event
    return last


def is_recent_birth(event: Reproduction | None, today: date) -> bool:
    if event is None or event.actual_birth_date is None:
        return False
    return event.actual_birth_date >= subtract_months(today, RECENT_BIRTH_MONTHS)


def scan_history(
    history: Sequence[Reproduction],
    today: date | datetime,
    offspring_reproduction_ids: Collection[UUID] = frozenset(),
) -> ReproductiveFacts:
    """Derive the reproductive predicates for a female from her events.

    `offspring_reproduction_ids` holds the ids of events that have at least one
    registered calf; only the last birth is ever checked against it.
    """
    today = civil_date(today)
    is_confirmed_pregnant = any(event.confirms_pregnancy for event in history)
    last_birth = find_last_birth(history)
    had_recent_birth = is_recent_birth(last_birth, today)

    has_registered_offspring = False
    pregnant_after_birth = False
    if had_recent_birth:
        has_registered_offspring = last_birth.id in offspring_reproduction_ids
        if is_confirmed_pregnant:
            pregnant_after_birth = any(
                event.pregnancy_confirmed_date is not None
                and event.pregnancy_confirmed_date >= last_birth.actual_birth_date
                for event in history
            )

    return ReproductiveFacts(
        is_confirmed_pregnant=is_confirmed_pregnant,
        last_birth=last_birth,
        had_recent_birth=had_recent_birth,
        has_registered_offspring=has_registered_offspring,
        pregnant_after_birth=pregnant_after_birth,
    )


def age_in_days(birth_date: date, today: date | datetime) -> int:
    return (civil_date(today) - birth_date).days


def evaluate_rules(
    age_days: int,
    sex: Sex | None,
    facts: ReproductiveFacts,
    previous: str | None = None,
) -> str:
    # Order matters: the first matching rule wins.
    if sex is Sex.MALE and age_days > YOUNG_MAX_DAYS:
        return LifeStage.BULL.value

    if sex is Sex.FEMALE and facts.had_recent_birth and facts.has_registered_offspring:
        if facts.pregnant_after_birth:
            return LifeStage.FRESH_PREGNANT.value
        return LifeStage.FRESH_OPEN.value

    if sex is Sex.FEMALE and facts.is_confirmed_pregnant:
        return LifeStage.PREGNANT.value

    if age_days <= CALF_MAX_DAYS:
        return LifeStage.CALF.value

    bands = (
        (WEANED_MAX_DAYS, LifeStage.WEANED_HEIFER, LifeStage.WEANED_STEER),
        (GROWING_MAX_DAYS, LifeStage.GROWING_HEIFER, LifeStage.GROWING_STEER),
        (YOUNG_MAX_DAYS, LifeStage.BREEDING_HEIFER, LifeStage.FATTENING_STEER),
    )
    for upper, female_stage, male_stage in bands:
        if age_days <= upper:
            if sex is Sex.FEMALE:
                return female_stage.value
            if sex is Sex.MALE:
                return male_stage.value
            break

    if sex is Sex.FEMALE and age_days > YOUNG_MAX_DAYS:
        return LifeStage.OPEN_COW.value

    return previous or ""


def classify_life_stage(
    animal: Animal,
    history: Sequence[Reproduction],
    today: date | datetime,
    *,
    offspring_reproduction_ids: Collection[UUID] = frozenset(),
) -> str:
    """Return the category label for `animal` on `today`.

    `history` is the animal's reproductive events as dam; it is ignored for
    anything other than a female.
    """
    sex = Sex.normalize(animal.sex)
    facts = NO_REPRODUCTIVE_FACTS
    if sex is Sex.FEMALE:
        facts = scan_history(history, today, offspring_reproduction_ids)
    return evaluate_rules(age_in_days(animal.birth_date, today), sex, facts, animal.category)
