"""Submission record export.

Builds the flat record that downstream senders append to the assessment
log sheet, one row per assessment. Transport is handled by the caller.

Columns, in sheet order: date, company, id, name, age, gender, best grip,
best sit-to-stand, best balance, best flexion, flags.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from fitscreen.core.audit import log_export
from fitscreen.core.config import settings
from fitscreen.schemas.assessment import InputRecord
from fitscreen.schemas.base import Gender
from fitscreen.schemas.result import RiskResult

SUBMISSION_COLUMNS: tuple[str, ...] = (
    "date",
    "company",
    "id",
    "name",
    "age",
    "gender",
    "best_grip",
    "best_sit_to_stand",
    "best_balance",
    "best_flexion",
    "flags",
)


def _utc_now() -> datetime:
    """Get current UTC time using timezone-aware datetime."""
    return datetime.now(UTC)


class SubmissionRecord(BaseModel):
    """One row of the assessment log sheet."""

    date: str = Field(..., description="ISO-8601 submission timestamp")
    company: str = Field("", description="Employer or organization name")
    id: str = Field("", description="Employee or subject identifier")
    name: str = Field("", description="Subject display name")
    age: int
    gender: Gender
    best_grip: float = Field(..., description="Adopted grip, either hand (kg)")
    best_sit_to_stand: float = Field(..., description="Adopted sit-to-stand count")
    best_balance: float = Field(..., description="Adopted balance time (s)")
    best_flexion: float = Field(..., description="Adopted flexion distance (cm)")
    flags: str = Field("", description="Advisory messages joined into one cell")

    def as_row(self) -> list[Any]:
        """Return the values in sheet column order."""
        data = self.model_dump(mode="json")
        return [data[column] for column in SUBMISSION_COLUMNS]


def build_submission_record(
    record: InputRecord,
    result: RiskResult,
    submitted_at: datetime | None = None,
    separator: str | None = None,
) -> SubmissionRecord:
    """Build the log sheet row for an evaluated assessment.

    Args:
        record: The assessment input.
        result: The RiskResult produced for that input.
        submitted_at: Submission time; defaults to now (UTC).
        separator: Joins messages; defaults to settings.message_separator.

    Returns:
        SubmissionRecord ready for a downstream sender.
    """
    subject = record.subject
    joiner = settings.message_separator if separator is None else separator
    timestamp = submitted_at or _utc_now()

    submission = SubmissionRecord(
        date=timestamp.isoformat(),
        company=subject.company,
        id=subject.subject_id,
        name=subject.name,
        age=subject.age,
        gender=subject.gender,
        best_grip=result.adopted.grip,
        best_sit_to_stand=result.adopted.sit_to_stand,
        best_balance=result.adopted.balance,
        best_flexion=result.adopted.flexion,
        flags=joiner.join(result.messages),
    )

    if settings.audit_enabled:
        log_export(subject_id=subject.subject_id, export_type="submission")

    return submission
