"""Fitness Risk Screening Engine.

Turns one assessment (paired attempts for grip, sit-to-stand, balance and
flexion plus age and gender) into screening flags, advisory messages and a
0-100 comparison profile.

evaluate() is pure: it holds no state and identical input always yields an
equal RiskResult. FitnessRiskService wraps it with payload validation and
audit logging.
"""

import logging
from threading import Lock
from typing import Any

from pydantic import ValidationError

from fitscreen.core.audit import log_evaluation, log_rejected_payload
from fitscreen.core.config import settings
from fitscreen.schemas.assessment import InputRecord
from fitscreen.schemas.base import Metric
from fitscreen.schemas.result import RiskResult
from fitscreen.services.best_value import adopt_values
from fitscreen.services.norms import score_balance, score_flexion, score_grip
from fitscreen.services.profile import build_profile, get_age_group, get_age_group_label
from fitscreen.services.risk_classifier import (
    compose_messages,
    compute_flags,
    compute_item_flags,
)

logger = logging.getLogger(__name__)


def evaluate(record: InputRecord) -> RiskResult:
    """Evaluate an assessment into a risk result.

    Args:
        record: The assessment input.

    Returns:
        RiskResult with flags, messages, profile and adopted values.
    """
    subject = record.subject
    adopted = adopt_values(record)
    flags = compute_flags(adopted, subject)

    scores = {
        Metric.GRIP: score_grip(adopted.grip, subject.age, subject.gender),
        Metric.SIT_TO_STAND: flags.sit_to_stand_score,
        Metric.BALANCE: score_balance(adopted.balance, subject.age, subject.gender),
        Metric.FLEXION: score_flexion(adopted.flexion, subject.age, subject.gender),
    }
    logger.debug("Profile scores: %s", {m.value: s for m, s in scores.items()})

    return RiskResult(
        is_sarcopenia_risk=flags.sarcopenia,
        is_locomotive_risk=flags.locomotive,
        is_fall_risk=flags.fall_risk,
        is_flexibility_low=flags.flexibility_low,
        item_flags=compute_item_flags(adopted, flags),
        messages=tuple(compose_messages(flags)),
        profile=build_profile(scores),
        age_group=get_age_group(subject.age),
        age_group_label=get_age_group_label(subject.age),
        adopted=adopted,
    )


class FitnessRiskService:
    """Service for fitness risk screening.

    Usage:
        service = FitnessRiskService()

        result = service.evaluate(record)

        # Or from a JSON-like payload
        result = service.evaluate_payload({
            "subject": {"age": 65, "gender": "male"},
            "grip": {"right": {"attempt1": 30, "attempt2": 32}},
            "sit_to_stand": {"attempt1": 12, "attempt2": 16},
        })
    """

    def __init__(self, audit_enabled: bool | None = None) -> None:
        """Initialize the service.

        Args:
            audit_enabled: Emit audit events; defaults to settings.audit_enabled.
        """
        self.audit_enabled = settings.audit_enabled if audit_enabled is None else audit_enabled

    def evaluate(self, record: InputRecord) -> RiskResult:
        """Evaluate an assessment and record an audit event."""
        result = evaluate(record)
        if self.audit_enabled:
            log_evaluation(
                subject_id=record.subject.subject_id,
                flags=result.screening_flags(),
                message_count=len(result.messages),
            )
        return result

    def parse_payload(self, payload: dict[str, Any]) -> InputRecord:
        """Validate a JSON-like payload into an InputRecord.

        Args:
            payload: Dict in the InputRecord layout.

        Returns:
            The validated assessment.

        Raises:
            ValueError: If the payload is not a well-typed assessment.
        """
        try:
            return InputRecord.model_validate(payload)
        except ValidationError as e:
            fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
            if self.audit_enabled:
                log_rejected_payload(f"invalid fields: {', '.join(fields)}")
            raise ValueError(f"Invalid assessment payload: {e}") from e

    def evaluate_payload(self, payload: dict[str, Any]) -> RiskResult:
        """Validate a JSON-like payload and evaluate it.

        Raises:
            ValueError: If the payload is not a well-typed assessment.
        """
        return self.evaluate(self.parse_payload(payload))

    def get_stats(self) -> dict[str, Any]:
        """Get statistics about the screening service.

        Returns:
            Dictionary with service statistics.
        """
        return {
            "metrics": [m.value for m in Metric],
            "audit_enabled": self.audit_enabled,
        }


# Singleton instance and lock
_fitness_risk_service: FitnessRiskService | None = None
_fitness_risk_lock = Lock()


def get_fitness_risk_service() -> FitnessRiskService:
    """Get the singleton FitnessRiskService instance.

    Returns:
        The singleton FitnessRiskService instance.
    """
    global _fitness_risk_service

    if _fitness_risk_service is None:
        with _fitness_risk_lock:
            if _fitness_risk_service is None:
                logger.info("Creating singleton FitnessRiskService instance")
                _fitness_risk_service = FitnessRiskService()

    return _fitness_risk_service


def reset_fitness_risk_service() -> None:
    """Reset the singleton instance (for testing)."""
    global _fitness_risk_service
    with _fitness_risk_lock:
        _fitness_risk_service = None
