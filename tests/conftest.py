"""Shared fixtures for the household test suite."""

import pytest
from structlog.testing import capture_logs

from household.audit import get_audit_logger
from household.config import get_settings
from household.models import Currency, Family, Job, Money, Person


@pytest.fixture
def audit_logs():
    """
    Capture structured log entries emitted during a test.

    The cached audit logger is dropped on both sides so that a fresh
    structlog logger binds to the capturing configuration.
    """
    get_audit_logger.cache_clear()
    with capture_logs() as logs:
        yield logs
    get_audit_logger.cache_clear()


@pytest.fixture
def clean_settings():
    """Reload settings from the environment for this test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def annual_job() -> Job:
    return Job(
        title="SDE",
        salary=Money(amount=100000, currency=Currency.USD),
        is_salary_per_hour=False,
    )


@pytest.fixture
def hourly_job() -> Job:
    return Job(
        title="UX Designer",
        salary=Money(amount=40, currency=Currency.USD),
        is_salary_per_hour=True,
    )


@pytest.fixture
def couple(annual_job, hourly_job) -> tuple[Person, Person]:
    """Lily and Jim, married to each other."""
    lily = Person(first_name="Lily", last_name="Joe", age=25, job=hourly_job)
    jim = Person(first_name="Jim", last_name="Green", age=28, job=annual_job, spouse=lily)
    lily.spouse = jim
    return lily, jim


@pytest.fixture
def family(couple) -> Family:
    return Family(members=list(couple))
