"""Entities referenced by timesheet records.

Users, customers, projects and activities are owned by the host application.
The export only reads them, so the models carry just what the template and
the budget calculations need.
"""

from decimal import Decimal
from typing import Dict, Literal, Optional

from pydantic import Field

from ggsa_export.models.base import BaseDataModel

BudgetType = Optional[Literal["month"]]


class User(BaseDataModel):
    """A user of the time-tracking application.

    Attributes:
        id: User identifier
        username: Login name
        alias: Optional display name
        export_decimal: Whether durations are shown as decimal hours in exports
        api_token: Secret token, never exposed to templates
        password_hash: Secret hash, never exposed to templates
    """

    id: int = Field(..., ge=1)
    username: str = Field(..., min_length=1)
    alias: Optional[str] = None
    export_decimal: bool = False
    api_token: Optional[str] = Field(None, repr=False)
    password_hash: Optional[str] = Field(None, repr=False)

    @property
    def display_name(self) -> str:
        """Alias when set, username otherwise."""
        return self.alias or self.username


class Customer(BaseDataModel):
    """A customer owning one or more projects."""

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    number: Optional[str] = None
    currency: str = Field("EUR", min_length=3, max_length=3)
    meta: Dict[str, str] = Field(default_factory=dict)


class _Budgeted(BaseDataModel):
    """Budget fields shared by projects and activities.

    ``budget`` is money, ``time_budget`` is seconds. Zero means no budget.
    """

    budget: Decimal = Field(Decimal("0"), ge=0)
    time_budget: int = Field(0, ge=0)
    budget_type: BudgetType = None

    def has_budget(self) -> bool:
        return self.budget > 0

    def has_time_budget(self) -> bool:
        return self.time_budget > 0

    def has_any_budget(self) -> bool:
        return self.has_budget() or self.has_time_budget()

    def is_monthly_budget(self) -> bool:
        return self.budget_type == "month"


class Project(_Budgeted):
    """A project belonging to a customer."""

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    customer: Customer
    order_number: Optional[str] = None
    meta: Dict[str, str] = Field(default_factory=dict)


class Activity(_Budgeted):
    """An activity, either global (no project) or project specific."""

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    project: Optional[Project] = None
    meta: Dict[str, str] = Field(default_factory=dict)
