"""Audit logging for assessment evaluations and exports.

Provides logging for:
- Risk evaluations run through the screening service
- Submission records built for downstream export
- Rejected assessment payloads

Audit events never carry measurement values or subject names; the
subject identifier is the only personal field recorded.
"""

import logging
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field

# Separate audit logger for assessment-level events
audit_logger = logging.getLogger("audit")


class AuditAction(str, Enum):
    """Types of auditable actions."""

    EVALUATE = "evaluate"
    EXPORT = "export"
    ERROR = "error"


class AuditEvent(BaseModel):
    """Audit event record.

    Contains all relevant context for an auditable action.
    """

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    action: AuditAction = Field(..., description="Type of action performed")
    resource_type: str = Field(..., description="Type of resource handled")
    subject_id: str | None = Field(None, description="Subject identifier if known")
    details: dict | None = Field(None, description="Additional context")
    success: bool = Field(True, description="Whether action succeeded")


def log_audit(
    action: AuditAction,
    resource_type: str,
    subject_id: str | None = None,
    details: dict | None = None,
    success: bool = True,
) -> AuditEvent:
    """Log an audit event.

    Args:
        action: Type of action being audited
        resource_type: The type of resource being handled
        subject_id: Subject identifier, if the caller supplied one
        details: Additional context
        success: Whether the action succeeded

    Returns:
        The created AuditEvent
    """
    event = AuditEvent(
        action=action,
        resource_type=resource_type,
        subject_id=subject_id or None,
        details=details,
        success=success,
    )

    log_level = logging.INFO if success else logging.WARNING
    audit_logger.log(
        log_level,
        f"AUDIT: {action.value} {resource_type}"
        f"{f' subject={event.subject_id}' if event.subject_id else ''}"
        f" success={success}",
        extra={"audit_event": event.model_dump()},
    )

    return event


def log_evaluation(
    subject_id: str | None,
    flags: dict[str, bool],
    message_count: int,
) -> AuditEvent:
    """Log a completed risk evaluation.

    Args:
        subject_id: Subject identifier (may be empty)
        flags: Screening flag name to value
        message_count: Number of advisory messages emitted

    Returns:
        The created AuditEvent
    """
    return log_audit(
        action=AuditAction.EVALUATE,
        resource_type="assessment",
        subject_id=subject_id,
        details={"flags": flags, "message_count": message_count},
    )


def log_export(
    subject_id: str | None,
    export_type: str,
) -> AuditEvent:
    """Log an export record being built.

    Args:
        subject_id: Subject whose result is being exported
        export_type: Type of export (e.g., "submission")

    Returns:
        The created AuditEvent
    """
    return log_audit(
        action=AuditAction.EXPORT,
        resource_type="export",
        subject_id=subject_id,
        details={"export_type": export_type},
    )


def log_rejected_payload(reason: str) -> AuditEvent:
    """Log an assessment payload that failed validation."""
    return log_audit(
        action=AuditAction.ERROR,
        resource_type="assessment",
        details={"reason": reason},
        success=False,
    )
