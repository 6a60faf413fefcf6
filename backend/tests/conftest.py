"""Pytest configuration and fixtures for screening tests."""

from collections.abc import Callable

import pytest

from fitscreen.schemas import GripPair, InputRecord, MeasurementPair, Subject
from fitscreen.schemas.base import Gender
from fitscreen.services.risk_engine import reset_fitness_risk_service

Attempts = tuple[float | None, float | None]


def pair(attempts: Attempts) -> MeasurementPair:
    """Build a MeasurementPair from an (attempt1, attempt2) tuple."""
    return MeasurementPair(attempt1=attempts[0], attempt2=attempts[1])


def build_record(
    age: int = 45,
    gender: Gender = Gender.MALE,
    grip_right: Attempts = (40, 42),
    grip_left: Attempts = (38, 39),
    sit_to_stand: Attempts = (25, 26),
    balance: Attempts = (30, 28),
    flexion: Attempts = (-2, -3),
    subject_id: str = "TEST-1",
) -> InputRecord:
    """Build an InputRecord; defaults describe a fit 45-year-old man."""
    return InputRecord(
        subject=Subject(
            age=age,
            gender=gender,
            company="Test Co",
            subject_id=subject_id,
            name="Test Subject",
        ),
        grip=GripPair(right=pair(grip_right), left=pair(grip_left)),
        sit_to_stand=pair(sit_to_stand),
        balance=pair(balance),
        flexion=pair(flexion),
    )


@pytest.fixture
def make_record() -> Callable[..., InputRecord]:
    """Factory fixture for assessment records."""
    return build_record


@pytest.fixture
def reference_record() -> InputRecord:
    """Male, 65: adequate grip, low sit-to-stand, poor balance, good flexion."""
    return build_record(
        age=65,
        gender=Gender.MALE,
        grip_right=(30, 32),
        grip_left=(28, 29),
        sit_to_stand=(12, 16),
        balance=(1.5, 1.8),
        flexion=(8, 3),
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service singleton around each test."""
    reset_fitness_risk_service()
    yield
    reset_fitness_risk_service()
