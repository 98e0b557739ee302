"""
Person Model

A person may hold a job and may have a spouse.

CRITICAL: The age gate runs once, when the person is created:
- under 16, a job passed to the constructor is dropped
- under 18, a spouse passed to the constructor is dropped
Later assignments to `job`, `spouse` or `age` are NOT re-checked.

DESIGN DECISION: `spouse` is a plain back reference to another
Person, not ownership. Two spouses point at each other, forming a
cycle, so Person equality is by `id` and the spouse is kept out of
repr() and model_dump().
"""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, model_validator

from household.audit import get_audit_logger
from household.models.job import Job


WORKING_AGE = 16
MARRIAGE_AGE = 18


class Person(BaseModel):
    """
    A person in a household.

    Person(first_name=..., last_name=..., age=...) creates someone
    without job or spouse. Passing `job` and/or `spouse` as well
    applies the age gate.
    """
    id: UUID = Field(
        default_factory=uuid4,
        description="Unique person ID"
    )
    first_name: str
    last_name: str
    age: int = Field(
        ...,
        ge=0,
        description="Age in years"
    )
    job: Optional[Job] = None
    spouse: Optional["Person"] = Field(
        default=None,
        repr=False,
        exclude=True,
        description="Reference to the spouse; not kept in sync automatically"
    )

    @model_validator(mode='after')
    def apply_age_gate(self) -> 'Person':
        """Drop a job or spouse the person is too young for."""
        audit = get_audit_logger()

        if self.job is not None and self.age < WORKING_AGE:
            self.job = None
            audit.log_relation_discarded(
                person_id=self.id,
                relation="job",
                age=self.age,
                minimum_age=WORKING_AGE,
            )

        if self.spouse is not None and self.age < MARRIAGE_AGE:
            self.spouse = None
            audit.log_relation_discarded(
                person_id=self.id,
                relation="spouse",
                age=self.age,
                minimum_age=MARRIAGE_AGE,
            )

        return self

    def marry(self, other: "Person") -> None:
        """
        Make `self` and `other` each other's spouse.

        This is the only operation that keeps both sides in sync.
        Assigning `spouse` directly only changes one side.
        """
        self.spouse = other
        other.spouse = self
        get_audit_logger().log_marriage(person_id=self.id, spouse_id=other.id)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def description(self) -> str:
        """
        One-line rendering of the person.

        Example:
            firstName: Jim, lastName: Green, age: 28, jobTitle: SDE,
            jobSalary: 100000.0 USD per year, spouseFirstName: Lily,
            spouseLastName: Joe
        """
        parts = [f"firstName: {self.first_name}, lastName: {self.last_name}, age: {self.age}"]

        if self.job is not None:
            parts.append(
                f"jobTitle: {self.job.title}, "
                f"jobSalary: {self.job.salary.stringified} {self.job.pay_basis}"
            )
        else:
            parts.append("job: nil")

        if self.spouse is not None:
            parts.append(
                f"spouseFirstName: {self.spouse.first_name}, "
                f"spouseLastName: {self.spouse.last_name}"
            )
        else:
            parts.append("spouse: nil")

        return ", ".join(parts)

    def __str__(self) -> str:
        return self.description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
