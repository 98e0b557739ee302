"""
Audit Logger

DESIGN DECISION: Every significant domain action is logged.
This provides:
1. Complete traceability of how a household came to be
2. Debugging capability when a rule silently drops caller input
   (the age gate)

The audit logger writes structured events through structlog.
Logging never changes the outcome of a domain operation.
"""

import logging
import sys
from functools import lru_cache
from typing import Optional
from uuid import UUID

import structlog

from household.config import AppSettings, get_settings
from household.audit.events import AuditEvent, AuditEventBuilder, AuditSeverity


def configure_structlog(settings: Optional[AppSettings] = None) -> None:
    """
    Configure structlog on top of the standard library logger.

    Renders JSON by default; `log_format=console` or debug mode switch
    to the human-readable renderer. Handlers and levels of the stdlib
    root logger are left to the application, see configure_logging().
    """
    settings = settings or get_settings()

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.log_format == "console" or settings.debug_mode
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Set up process-wide logging for an application using this package.

    Installs a stdout handler on the root logger at the configured level
    and reconfigures structlog. Library code never calls this.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.log_level_number,
    )
    configure_structlog(settings)


configure_structlog()


class AuditLogger:
    """
    Central audit logging service.

    Domain models report through the shared instance returned by
    get_audit_logger().
    """

    def __init__(self, name: str = "household.audit"):
        self._logger = structlog.get_logger(name).bind(
            environment=get_settings().app_environment,
        )

    def log(self, event: AuditEvent) -> AuditEvent:
        """
        Log an audit event at the level matching its severity.

        Returns the event so callers can keep a reference to it.
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        return event

    def log_family_created(
        self,
        family_id: UUID,
        member_count: int,
        adult_count: int,
    ) -> AuditEvent:
        """Log family creation."""
        return self.log(AuditEventBuilder.family_created(
            family_id=family_id,
            member_count=member_count,
            adult_count=adult_count,
        ))

    def log_family_rejected(
        self,
        member_count: int,
        oldest_age: Optional[int],
        required_age: int,
    ) -> AuditEvent:
        """Log a family that failed its construction invariant."""
        return self.log(AuditEventBuilder.family_rejected(
            member_count=member_count,
            oldest_age=oldest_age,
            required_age=required_age,
        ))

    def log_child_added(
        self,
        family_id: UUID,
        child_id: UUID,
        name: str,
    ) -> AuditEvent:
        """Log a child joining a family."""
        return self.log(AuditEventBuilder.child_added(
            family_id=family_id,
            child_id=child_id,
            name=name,
        ))

    def log_household_income(
        self,
        family_id: UUID,
        income: str,
        earners: int,
    ) -> AuditEvent:
        """Log a household income calculation."""
        return self.log(AuditEventBuilder.household_income_calculated(
            family_id=family_id,
            income=income,
            earners=earners,
        ))

    def log_relation_discarded(
        self,
        person_id: UUID,
        relation: str,
        age: int,
        minimum_age: int,
    ) -> AuditEvent:
        """Log a job or spouse dropped by the age gate."""
        return self.log(AuditEventBuilder.relation_discarded(
            person_id=person_id,
            relation=relation,
            age=age,
            minimum_age=minimum_age,
        ))

    def log_marriage(
        self,
        person_id: UUID,
        spouse_id: UUID,
    ) -> AuditEvent:
        """Log a marriage."""
        return self.log(AuditEventBuilder.marriage_recorded(
            person_id=person_id,
            spouse_id=spouse_id,
        ))

    def log_salary_raised(
        self,
        title: str,
        percent: float,
        salary: str,
    ) -> AuditEvent:
        """Log a salary raise."""
        return self.log(AuditEventBuilder.salary_raised(
            title=title,
            percent=percent,
            salary=salary,
        ))


@lru_cache()
def get_audit_logger() -> AuditLogger:
    """
    Get the shared audit logger (cached).

    Call get_audit_logger.cache_clear() to get a fresh instance,
    e.g. after reconfiguring structlog.
    """
    return AuditLogger()
