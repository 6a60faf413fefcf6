"""Pydantic schemas for Fitness Risk Screening."""

from fitscreen.schemas.assessment import (
    GripPair,
    InputRecord,
    MeasurementPair,
    Subject,
)
from fitscreen.schemas.base import AgeGroup, Gender, Metric
from fitscreen.schemas.result import (
    AdoptedValues,
    ItemFlags,
    ProfilePoint,
    RiskResult,
)

__all__ = [
    # Enums
    "AgeGroup",
    "Gender",
    "Metric",
    # Assessment
    "GripPair",
    "InputRecord",
    "MeasurementPair",
    "Subject",
    # Result
    "AdoptedValues",
    "ItemFlags",
    "ProfilePoint",
    "RiskResult",
]
