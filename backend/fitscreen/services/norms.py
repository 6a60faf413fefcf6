"""Normative score tables and scoring functions.

Each metric is mapped onto a common 0-100 scale so that dissimilar units
(kg, repetitions, seconds, cm) can be compared on one profile axis.
Sit-to-stand, balance and flexion are quantized to 20/40/60/80/100; grip
is continuous in [20, 100].

Sources:
- Sit-to-stand (CS-30): age/gender criteria after Nakatani et al.
- Grip: national physical fitness survey means by age band.
- Balance: eyes-closed single-leg stance grades (ages 60-64 row).
- Flexion: fixed fingertip-to-floor bands.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from fitscreen.schemas.base import Gender

T = TypeVar("T")

SCORE_STEPS = (20, 40, 60, 80, 100)
MIN_SCORE = 20.0
MAX_SCORE = 100.0


@dataclass(frozen=True)
class AgeBand(Generic[T]):
    """An age band with an exclusive upper bound (None = open-ended)."""

    upper: int | None
    value: T


@dataclass(frozen=True)
class SitToStandCriteria:
    """CS-30 grade boundaries for one gender and age band."""

    grade1_max: int  # at or below: grade 1
    grade3_min: int  # from here to grade3_max: grade 3
    grade3_max: int
    grade5_min: int  # at or above: grade 5


@dataclass(frozen=True)
class BalanceBands:
    """Gender-specific upper bounds (inclusive) for the 60 and 80 grades."""

    grade3_max: float
    grade4_max: float


def lookup_band(bands: tuple[AgeBand[T], ...], age: int) -> T:
    """Return the value of the first band whose upper bound exceeds age.

    Ages beyond the last bounded band fall into the open-ended band.
    """
    for band in bands:
        if band.upper is None or age < band.upper:
            return band.value
    return bands[-1].value


# ============================================================================
# Reference Tables
# ============================================================================

SIT_TO_STAND_NORMS: dict[Gender, tuple[AgeBand[SitToStandCriteria], ...]] = {
    Gender.MALE: (
        AgeBand(60, SitToStandCriteria(17, 22, 27, 32)),
        AgeBand(70, SitToStandCriteria(13, 18, 21, 26)),
        AgeBand(80, SitToStandCriteria(11, 16, 20, 25)),
        AgeBand(None, SitToStandCriteria(9, 14, 16, 20)),
    ),
    Gender.FEMALE: (
        AgeBand(60, SitToStandCriteria(15, 20, 24, 30)),
        AgeBand(70, SitToStandCriteria(11, 17, 21, 27)),
        AgeBand(80, SitToStandCriteria(9, 15, 19, 24)),
        AgeBand(None, SitToStandCriteria(8, 13, 16, 20)),
    ),
}

GRIP_REFERENCE_MEANS: dict[Gender, tuple[AgeBand[float], ...]] = {
    Gender.MALE: (
        AgeBand(40, 47.0),
        AgeBand(60, 44.0),
        AgeBand(65, 41.9),
        AgeBand(70, 39.4),
        AgeBand(75, 37.5),
        AgeBand(None, 35.1),
    ),
    Gender.FEMALE: (
        AgeBand(40, 28.0),
        AgeBand(60, 27.0),
        AgeBand(65, 26.1),
        AgeBand(70, 25.1),
        AgeBand(75, 23.8),
        AgeBand(None, 22.8),
    ),
}

BALANCE_GRADE1_BELOW = 2.0
BALANCE_GRADE2_BELOW = 5.0
BALANCE_BANDS: dict[Gender, BalanceBands] = {
    Gender.MALE: BalanceBands(grade3_max=10, grade4_max=24),
    Gender.FEMALE: BalanceBands(grade3_max=11, grade4_max=28),
}

# (inclusive upper bound in cm, score); anything above the last bound scores 20
FLEXION_BANDS: tuple[tuple[float, int], ...] = (
    (-10.0, 100),
    (0.0, 80),
    (5.0, 60),
    (15.0, 40),
)


# ============================================================================
# Scoring Functions
# ============================================================================

def sit_to_stand_criteria(age: int, gender: Gender) -> SitToStandCriteria:
    """Get the CS-30 criteria row for a subject."""
    return lookup_band(SIT_TO_STAND_NORMS[gender], age)


def score_sit_to_stand(count: float, age: int, gender: Gender) -> int:
    """Score a sit-to-stand count against age/gender criteria.

    Args:
        count: Adopted repetitions in 30 seconds.
        age: Subject age in years.
        gender: Subject gender.

    Returns:
        One of 20, 40, 60, 80, 100.
    """
    c = sit_to_stand_criteria(age, gender)
    if count <= c.grade1_max:
        return 20
    if count < c.grade3_min:
        return 40
    if count <= c.grade3_max:
        return 60
    if count < c.grade5_min:
        return 80
    return 100


def grip_reference_average(age: int, gender: Gender) -> float:
    """Get the reference mean grip strength (kg) for a subject."""
    return lookup_band(GRIP_REFERENCE_MEANS[gender], age)


def score_grip(grip_kg: float, age: int, gender: Gender) -> float:
    """Score grip strength by its ratio to the age/gender mean.

    Piecewise linear: below 80% of the mean scores 20-28, 80-100% maps to
    40-60, 100-120% to 60-80, and above 120% rises at half slope to 100.

    Args:
        grip_kg: Adopted grip strength in kg.
        age: Subject age in years.
        gender: Subject gender.

    Returns:
        Continuous score in [20, 100].
    """
    ratio = grip_kg / grip_reference_average(age, gender)
    if ratio < 0.8:
        return MIN_SCORE + ratio * 10
    if ratio < 1.0:
        return 40 + (ratio - 0.8) * 100
    if ratio < 1.2:
        return 60 + (ratio - 1.0) * 100
    return min(MAX_SCORE, 80 + (ratio - 1.2) * 50)


def score_balance(seconds: float, age: int, gender: Gender) -> int:
    """Score eyes-closed single-leg balance time.

    A single age row (60-64) is applied to every age, so age does not
    change the result.
    """
    if seconds < BALANCE_GRADE1_BELOW:
        return 20
    if seconds < BALANCE_GRADE2_BELOW:
        return 40
    bands = BALANCE_BANDS[gender]
    if seconds <= bands.grade3_max:
        return 60
    if seconds <= bands.grade4_max:
        return 80
    return 100


def score_flexion(cm: float, age: int | None = None, gender: Gender | None = None) -> int:
    """Score fingertip-to-floor distance; smaller is better.

    The bands are the same for every age and gender.
    """
    for upper, score in FLEXION_BANDS:
        if cm <= upper:
            return score
    return 20
