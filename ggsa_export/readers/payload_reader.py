"""Reader for JSON export payloads.

Hosts that do not embed the renderer can dump the data of an export to a
JSON document. Records reference each other by id; the reader validates the
document and resolves the references into domain objects.

Payload layout::

    {
        "users": [{"id": 1, "username": "jdoe", "export_decimal": true}],
        "customers": [{"id": 1, "name": "ACME", "currency": "EUR"}],
        "projects": [{"id": 1, "name": "Web", "customer_id": 1, "budget": "5000"}],
        "activities": [{"id": 1, "name": "Development", "project_id": null}],
        "timesheets": [
            {"id": 1, "begin": "2024-03-04T09:00:00", "duration": 3600,
             "description": "Code review", "user_id": 1, "project_id": 1,
             "activity_id": 1, "rate": "85.00"}
        ]
    }
"""

import datetime as dt
import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import Field

from ggsa_export.models.base import BaseDataModel
from ggsa_export.models.entities import Activity, BudgetType, Customer, Project, User
from ggsa_export.models.timesheet import TimesheetEntry
from ggsa_export.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)


class PayloadReferenceError(ValueError):
    """A record references an id that is not part of the payload."""


class ProjectRecord(BaseDataModel):
    id: int
    name: str
    customer_id: int
    order_number: Optional[str] = None
    budget: Decimal = Decimal("0")
    time_budget: int = 0
    budget_type: BudgetType = None
    meta: Dict[str, str] = Field(default_factory=dict)


class ActivityRecord(BaseDataModel):
    id: int
    name: str
    project_id: Optional[int] = None
    budget: Decimal = Decimal("0")
    time_budget: int = 0
    budget_type: BudgetType = None
    meta: Dict[str, str] = Field(default_factory=dict)


class TimesheetRecord(BaseDataModel):
    id: int
    begin: dt.datetime
    end: Optional[dt.datetime] = None
    duration: int = 0
    description: Optional[str] = None
    user_id: int
    project_id: Optional[int] = None
    activity_id: Optional[int] = None
    rate: Decimal = Decimal("0")
    internal_rate: Decimal = Decimal("0")
    meta: Dict[str, str] = Field(default_factory=dict)


class ExportPayload(BaseDataModel):
    """Validated, unresolved export payload."""

    users: List[User] = Field(default_factory=list)
    customers: List[Customer] = Field(default_factory=list)
    projects: List[ProjectRecord] = Field(default_factory=list)
    activities: List[ActivityRecord] = Field(default_factory=list)
    timesheets: List[TimesheetRecord] = Field(default_factory=list)


@dataclass
class ExportDataset:
    """Resolved export data.

    Attributes:
        entries: Timesheet entries in payload order
        users: Users by id
        customers: Customers by id
        projects: Projects by id
        activities: Activities by id
    """

    entries: List[TimesheetEntry] = field(default_factory=list)
    users: Dict[int, User] = field(default_factory=dict)
    customers: Dict[int, Customer] = field(default_factory=dict)
    projects: Dict[int, Project] = field(default_factory=dict)
    activities: Dict[int, Activity] = field(default_factory=dict)

    def find_user(self, user_id: Optional[int]) -> Optional[User]:
        """Look up a user, returning None for a None id.

        Raises:
            PayloadReferenceError: If the id is unknown
        """
        if user_id is None:
            return None
        return _lookup(self.users, user_id, "user")


def _lookup(items: Dict[int, object], item_id: int, kind: str):
    try:
        return items[item_id]
    except KeyError:
        raise PayloadReferenceError(f"Unknown {kind} id: {item_id}")


def resolve_payload(payload: ExportPayload) -> ExportDataset:
    """Resolve id references of a validated payload into domain objects.

    Raises:
        PayloadReferenceError: If any reference points at a missing record
    """
    dataset = ExportDataset(
        users={user.id: user for user in payload.users},
        customers={customer.id: customer for customer in payload.customers},
    )

    for record in payload.projects:
        data = record.model_dump(exclude={"customer_id"})
        data["customer"] = _lookup(dataset.customers, record.customer_id, "customer")
        dataset.projects[record.id] = Project(**data)

    for record in payload.activities:
        data = record.model_dump(exclude={"project_id"})
        if record.project_id is not None:
            data["project"] = _lookup(dataset.projects, record.project_id, "project")
        dataset.activities[record.id] = Activity(**data)

    for record in payload.timesheets:
        data = record.model_dump(exclude={"user_id", "project_id", "activity_id"})
        data["user"] = _lookup(dataset.users, record.user_id, "user")
        if record.project_id is not None:
            data["project"] = _lookup(dataset.projects, record.project_id, "project")
        if record.activity_id is not None:
            data["activity"] = _lookup(
                dataset.activities, record.activity_id, "activity"
            )
        dataset.entries.append(TimesheetEntry(**data))

    return dataset


@log_function_call
def read_payload(path: Union[str, Path]) -> ExportDataset:
    """Read, validate and resolve an export payload file.

    Args:
        path: JSON file path

    Returns:
        Resolved ExportDataset

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If records are malformed
        PayloadReferenceError: If references cannot be resolved
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    payload = ExportPayload.model_validate(raw)
    dataset = resolve_payload(payload)
    logger.info(
        f"Read {len(dataset.entries)} timesheet entries from {path} "
        f"({len(dataset.projects)} projects, {len(dataset.activities)} activities)"
    )
    return dataset
