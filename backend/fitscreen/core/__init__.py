"""Core application configuration and utilities."""

from fitscreen.core.audit import (
    AuditAction,
    AuditEvent,
    log_audit,
    log_evaluation,
    log_export,
    log_rejected_payload,
)
from fitscreen.core.config import Settings, settings

__all__ = [
    # Config
    "Settings",
    "settings",
    # Audit
    "AuditAction",
    "AuditEvent",
    "log_audit",
    "log_evaluation",
    "log_export",
    "log_rejected_payload",
]
