"""Base enums for Fitness Risk Screening."""

from enum import Enum


class Gender(str, Enum):
    """Subject gender used for norm and cutoff selection."""

    MALE = "male"
    FEMALE = "female"


class AgeGroup(str, Enum):
    """Display age group for the comparison baseline."""

    YOUNG = "young"  # under 40
    MIDDLE = "middle"  # 40-59
    SENIOR = "senior"  # 60 and over


class Metric(str, Enum):
    """Measured fitness items, in profile order."""

    GRIP = "grip"
    SIT_TO_STAND = "sit_to_stand"
    BALANCE = "balance"
    FLEXION = "flexion"
