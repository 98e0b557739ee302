"""
Audit Models for the Household Model

Every significant domain action is recorded as an audit event:
families created or rejected, children added, salaries raised,
relations discarded by the age gate, marriages recorded.

DESIGN DECISION: Audit events are only emitted, never edited.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Family lifecycle
    FAMILY_CREATED = "family_created"
    FAMILY_REJECTED = "family_rejected"
    CHILD_ADDED = "child_added"
    HOUSEHOLD_INCOME_CALCULATED = "household_income_calculated"

    # Person lifecycle
    RELATION_DISCARDED = "relation_discarded"
    MARRIAGE_RECORDED = "marriage_recorded"

    # Employment
    SALARY_RAISED = "salary_raised"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'family', 'person', 'job')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "description": self.description,
            "details": self.details,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.family_created(family_id, 2, 2)
        event = AuditEventBuilder.child_added(family_id, child_id, "Laura Green")
    """

    @staticmethod
    def family_created(
        family_id: UUID,
        member_count: int,
        adult_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FAMILY_CREATED,
            entity_type="family",
            entity_id=family_id,
            description=f"Family created with {member_count} members",
            details={
                "member_count": member_count,
                "adult_count": adult_count,
            },
        )

    @staticmethod
    def family_rejected(
        member_count: int,
        oldest_age: Optional[int],
        required_age: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FAMILY_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="family",
            description=f"Family rejected: no member is age {required_age} or older",
            details={
                "member_count": member_count,
                "oldest_age": oldest_age,
                "required_age": required_age,
            },
        )

    @staticmethod
    def child_added(
        family_id: UUID,
        child_id: UUID,
        name: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CHILD_ADDED,
            entity_type="family",
            entity_id=family_id,
            description=f"Child added: {name}",
            details={
                "child_id": str(child_id),
                "name": name,
            },
        )

    @staticmethod
    def household_income_calculated(
        family_id: UUID,
        income: str,
        earners: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.HOUSEHOLD_INCOME_CALCULATED,
            severity=AuditSeverity.DEBUG,
            entity_type="family",
            entity_id=family_id,
            description=f"Household income calculated: {income}",
            details={
                "income": income,
                "earners": earners,
            },
        )

    @staticmethod
    def relation_discarded(
        person_id: UUID,
        relation: str,
        age: int,
        minimum_age: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RELATION_DISCARDED,
            severity=AuditSeverity.WARNING,
            entity_type="person",
            entity_id=person_id,
            description=f"Discarded {relation}: age {age} is below {minimum_age}",
            details={
                "relation": relation,
                "age": age,
                "minimum_age": minimum_age,
            },
        )

    @staticmethod
    def marriage_recorded(
        person_id: UUID,
        spouse_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MARRIAGE_RECORDED,
            entity_type="person",
            entity_id=person_id,
            description="Marriage recorded",
            details={
                "spouse_id": str(spouse_id),
            },
        )

    @staticmethod
    def salary_raised(
        title: str,
        percent: float,
        salary: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SALARY_RAISED,
            entity_type="job",
            description=f"Salary raised by {percent}% for {title}",
            details={
                "title": title,
                "percent": percent,
                "salary": salary,
            },
        )
