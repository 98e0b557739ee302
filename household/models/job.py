"""
Job Model

A job pays either by the hour or by the year. The salary Money is
owned by the job: it is copied on the way in, and raise_salary()
mutates that copy in place.
"""

from pydantic import BaseModel, Field, field_validator

from household.audit import get_audit_logger
from household.models.money import Money


class Job(BaseModel):
    """An employment record with a salary and a pay basis."""
    title: str = Field(
        ...,
        description="Job title"
    )
    salary: Money = Field(
        ...,
        description="Hourly rate or annual salary, see is_salary_per_hour"
    )
    is_salary_per_hour: bool = Field(
        ...,
        description="True if salary is an hourly rate, False if annual"
    )

    @field_validator('salary')
    @classmethod
    def own_salary(cls, v: Money) -> Money:
        """Keep a private copy so raises never leak into the caller's Money."""
        return v.model_copy()

    def calculate_income(self, hours: float) -> Money:
        """
        Income for the given number of worked hours.

        Hourly jobs pay amount * hours; annual jobs pay the salary
        whatever the hours.
        """
        if self.is_salary_per_hour:
            return Money(amount=self.salary.amount * hours, currency=self.salary.currency)
        return self.salary.model_copy()

    def raise_salary(self, percent: float) -> Money:
        """
        Raise the salary by `percent` percent, in place.

        Returns the job's own salary object (not a copy), so the result
        always mirrors the mutated field.
        """
        self.salary.amount = self.salary.amount * (1 + percent / 100)
        get_audit_logger().log_salary_raised(
            title=self.title,
            percent=percent,
            salary=self.salary.stringified,
        )
        return self.salary

    @property
    def pay_basis(self) -> str:
        return "per hour" if self.is_salary_per_hour else "per year"

    @property
    def description(self) -> str:
        """'JobTitle: SDE, Salary: USD100000.0 per year'."""
        return f"JobTitle: {self.title}, Salary: {self.salary.description} {self.pay_basis}"

    def __str__(self) -> str:
        return self.description
