"""Fitness Risk Screening.

Scores grip strength, sit-to-stand, single-leg balance and trunk flexion
against age/gender norms and screens for sarcopenia, locomotive syndrome,
fall risk and low flexibility.
"""

from fitscreen.schemas import (
    GripPair,
    InputRecord,
    MeasurementPair,
    RiskResult,
    Subject,
)
from fitscreen.services.risk_engine import evaluate

__version__ = "0.1.0"

__all__ = [
    "GripPair",
    "InputRecord",
    "MeasurementPair",
    "RiskResult",
    "Subject",
    "evaluate",
]
