"""Audit logging package."""

from household.audit.events import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from household.audit.logger import (
    AuditLogger,
    configure_logging,
    configure_structlog,
    get_audit_logger,
)

__all__ = [
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
    "AuditLogger",
    "configure_logging",
    "configure_structlog",
    "get_audit_logger",
]
