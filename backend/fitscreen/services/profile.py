"""Profile assembly.

Places metric scores onto the comparison profile and resolves the age
group shown next to it. The reference line is a fixed product constant and
does not come from the norm tables.
"""

from fitscreen.schemas.base import AgeGroup, Metric
from fitscreen.schemas.result import ProfilePoint

REFERENCE_SCORE = 60.0
SCALE_MAX = 100.0

PROFILE_LABELS: dict[Metric, str] = {
    Metric.GRIP: "Overall strength (grip)",
    Metric.SIT_TO_STAND: "Lower-body strength (sit-to-stand)",
    Metric.BALANCE: "Balance (single-leg)",
    Metric.FLEXION: "Flexibility (trunk flexion)",
}

PROFILE_ORDER: tuple[Metric, ...] = (
    Metric.GRIP,
    Metric.SIT_TO_STAND,
    Metric.BALANCE,
    Metric.FLEXION,
)

AGE_GROUP_LABELS: dict[AgeGroup, str] = {
    AgeGroup.YOUNG: "20s-30s",
    AgeGroup.MIDDLE: "40s-50s",
    AgeGroup.SENIOR: "60 and over",
}


def get_age_group(age: int) -> AgeGroup:
    """Classify an age into the display age group."""
    if age < 40:
        return AgeGroup.YOUNG
    if age < 60:
        return AgeGroup.MIDDLE
    return AgeGroup.SENIOR


def get_age_group_label(age: int) -> str:
    """Get the display label for an age's group."""
    return AGE_GROUP_LABELS[get_age_group(age)]


def build_profile(scores: dict[Metric, float]) -> tuple[ProfilePoint, ...]:
    """Build the profile points in fixed metric order.

    Args:
        scores: Score per metric; all four metrics are required.

    Returns:
        Four ProfilePoints with the shared reference line and scale.
    """
    return tuple(
        ProfilePoint(
            metric=metric,
            label=PROFILE_LABELS[metric],
            score=scores[metric],
            reference_average=REFERENCE_SCORE,
            scale_max=SCALE_MAX,
        )
        for metric in PROFILE_ORDER
    )
