"""Tests for assessment and result schemas."""

import pytest
from pydantic import ValidationError

from fitscreen.schemas import (
    GripPair,
    InputRecord,
    MeasurementPair,
    Subject,
)
from fitscreen.schemas.base import Gender, Metric
from fitscreen.services.risk_engine import evaluate


class TestMeasurementPair:
    """Test the two-attempt container."""

    def test_defaults_are_unrecorded(self):
        """Test that attempts default to None."""
        pair = MeasurementPair()
        assert pair.attempt1 is None
        assert pair.attempt2 is None
        assert pair.recorded() == []

    def test_recorded_keeps_zero(self):
        """Test that 0 counts as recorded."""
        assert MeasurementPair(attempt1=0, attempt2=None).recorded() == [0]

    def test_numeric_strings_coerced(self):
        """Test lax numeric coercion for form input."""
        assert MeasurementPair(attempt1="12.5").attempt1 == 12.5

    def test_non_numeric_rejected(self):
        """Test that text values are rejected."""
        with pytest.raises(ValidationError):
            MeasurementPair(attempt1="twelve")

    def test_frozen(self):
        """Test that attempts cannot be reassigned."""
        pair = MeasurementPair(attempt1=1)
        with pytest.raises(ValidationError):
            pair.attempt1 = 2


class TestSubject:
    """Test subject demographics."""

    def test_gender_values(self):
        """Test accepted gender values."""
        assert Subject(age=50, gender="male").gender == Gender.MALE
        assert Subject(age=50, gender="female").gender == Gender.FEMALE

    def test_unknown_gender_rejected(self):
        """Test that only the two normed genders are accepted."""
        with pytest.raises(ValidationError):
            Subject(age=50, gender="unknown")

    def test_age_required(self):
        """Test that age is required."""
        with pytest.raises(ValidationError):
            Subject(gender="male")

    def test_identification_defaults(self):
        """Test that identification fields default to empty."""
        subject = Subject(age=50, gender=Gender.MALE)
        assert subject.company == subject.subject_id == subject.name == ""


class TestInputRecord:
    """Test the full assessment input."""

    def test_metrics_default_to_empty(self):
        """Test that unspecified metrics have no attempts."""
        record = InputRecord(subject=Subject(age=50, gender=Gender.FEMALE))

        assert record.grip == GripPair()
        assert record.sit_to_stand.recorded() == []
        assert record.flexion.recorded() == []

    def test_from_payload(self):
        """Test validation from a nested dict."""
        record = InputRecord.model_validate(
            {
                "subject": {"age": 70, "gender": "female"},
                "grip": {"left": {"attempt1": 20}},
            }
        )

        assert record.grip.left.attempt1 == 20
        assert record.grip.right.recorded() == []


class TestRiskResult:
    """Test result immutability and helpers."""

    def test_frozen(self, reference_record):
        """Test that results cannot be modified."""
        result = evaluate(reference_record)
        with pytest.raises(ValidationError):
            result.is_fall_risk = False

    def test_screening_flags(self, reference_record):
        """Test the named flag mapping."""
        assert evaluate(reference_record).screening_flags() == {
            "sarcopenia": False,
            "locomotive": False,
            "fall": True,
            "flexibility_low": False,
        }

    def test_json_dump(self, reference_record):
        """Test JSON-mode serialization."""
        data = evaluate(reference_record).model_dump(mode="json")

        assert data["age_group"] == "senior"
        assert [p["metric"] for p in data["profile"]] == [m.value for m in Metric]
