"""Query value objects carried through an export.

The host application builds the query; the export only reads its filters and
the users it references, and derives a customer-scoped copy for the customer
meta-field lookup.
"""

import datetime as dt
from typing import List, Literal, Optional, TypeVar

from pydantic import Field

from ggsa_export.models.base import BaseDataModel
from ggsa_export.models.entities import Activity, Customer, Project, User

QueryT = TypeVar("QueryT", bound="BaseQuery")


class BaseQuery(BaseDataModel):
    """Filter criteria shared by every query kind.

    Attributes:
        current_user: The user running the export
        search_term: Free-text search
        order_by: Sort column
        order: Sort direction
        page: Page number (1-based)
        page_size: Items per page
    """

    current_user: Optional[User] = None
    search_term: Optional[str] = None
    order_by: str = "id"
    order: Literal["ASC", "DESC"] = "ASC"
    page: int = Field(1, ge=1)
    page_size: int = Field(50, ge=1)

    def copy_to(self, target: QueryT) -> QueryT:
        """Copy the shared filter criteria into another query kind.

        Args:
            target: Query instance to receive the criteria

        Returns:
            A new query of the target's type; neither input is modified

        Example:
            >>> query = TimesheetQuery(search_term="review")
            >>> query.copy_to(CustomerQuery()).search_term
            'review'
        """
        shared = {name: getattr(self, name) for name in BaseQuery.model_fields}
        return target.model_copy(update=shared)


class TimesheetQuery(BaseQuery):
    """Query used to select the timesheets of an export."""

    user: Optional[User] = None
    begin: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    customers: List[Customer] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    activities: List[Activity] = Field(default_factory=list)


class CustomerQuery(BaseQuery):
    """Query targeting customers."""

    customer_ids: List[int] = Field(default_factory=list)
