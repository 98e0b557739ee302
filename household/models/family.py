"""
Family Model

A family is an ordered group of people.

CRITICAL: A family can only be created if at least one member is
21 or older. Creation fails loudly with IllegalInitializationError
otherwise.

The rule is checked once, at creation. Members are only ever added
(have_child), never removed, so a valid family stays valid.
"""

from typing import Sequence
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator

from household.audit import get_audit_logger
from household.models.errors import IllegalInitializationError, OutOfBoundsError
from household.models.money import Currency, Money
from household.models.person import Person


ADULT_AGE = 21


class Family(BaseModel):
    """A household of people, led by at least one adult."""

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique family ID"
    )
    members: list[Person] = Field(
        ...,
        description="Members in the order given; household_income() relies on it"
    )

    @model_validator(mode='after')
    def require_adult(self) -> 'Family':
        """Refuse to create a family without a member aged 21+."""
        audit = get_audit_logger()
        adults = [member for member in self.members if member.age >= ADULT_AGE]

        if not adults:
            audit.log_family_rejected(
                member_count=len(self.members),
                oldest_age=max((member.age for member in self.members), default=None),
                required_age=ADULT_AGE,
            )
            raise IllegalInitializationError(
                f"A family needs at least one member aged {ADULT_AGE} or older"
            )

        audit.log_family_created(
            family_id=self.id,
            member_count=len(self.members),
            adult_count=len(adults),
        )
        return self

    def household_income(self, working_hours: Sequence[float]) -> Money:
        """
        Combined income of all members with a job, in USD.

        Args:
            working_hours: Hours worked per member, aligned by index with
                `members`. Entries for members without a job are ignored
                (conventionally 0).

        Raises:
            OutOfBoundsError: If there are fewer hour entries than members.
        """
        if len(working_hours) < len(self.members):
            raise OutOfBoundsError(
                f"Got {len(working_hours)} working hour entries for "
                f"{len(self.members)} members"
            )

        combined = Money(amount=0, currency=Currency.USD)
        earners = 0
        for member, hours in zip(self.members, working_hours):
            if member.job is None:
                continue
            combined = Money.add(combined, member.job.calculate_income(hours))
            earners += 1

        get_audit_logger().log_household_income(
            family_id=self.id,
            income=combined.stringified,
            earners=earners,
        )
        return combined

    def have_child(self, first_name: str, last_name: str) -> None:
        """Add a newborn (age 0, no job, no spouse) to the family."""
        child = Person(first_name=first_name, last_name=last_name, age=0)
        self.members.append(child)
        get_audit_logger().log_child_added(
            family_id=self.id,
            child_id=child.id,
            name=child.full_name,
        )

    @property
    def description(self) -> str:
        """Every member's description, one per line."""
        return "".join(f"{member.description}\n" for member in self.members)

    def __str__(self) -> str:
        return self.description
