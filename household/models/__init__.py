"""
Data Models Package

This package contains the Pydantic models of the household domain.
Data flows upward: Money -> Job -> Person -> Family.
"""

from household.models.errors import (
    HouseholdError,
    IllegalInitializationError,
    InvalidArgumentError,
    OutOfBoundsError,
)
from household.models.money import EXCHANGE_RATES, Currency, Money
from household.models.job import Job
from household.models.person import MARRIAGE_AGE, WORKING_AGE, Person
from household.models.family import ADULT_AGE, Family

__all__ = [
    # Errors
    "HouseholdError",
    "IllegalInitializationError",
    "InvalidArgumentError",
    "OutOfBoundsError",
    # Money
    "EXCHANGE_RATES",
    "Currency",
    "Money",
    # People
    "Job",
    "MARRIAGE_AGE",
    "WORKING_AGE",
    "Person",
    # Households
    "ADULT_AGE",
    "Family",
]
