"""Base model for the export domain objects.

Every entity handed to the renderer (users, customers, projects, activities,
timesheets and the grouped rows derived from them) shares this pydantic
configuration.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all export data models.

    Provides:
    - Validation with lenient type coercion (ISO strings become datetimes)
    - Re-validation whenever an attribute is assigned
    - Rejection of unknown fields, so typos in payloads surface early

    Example:
        >>> class Tag(BaseDataModel):
        ...     name: str
        >>> Tag(name="billable").model_dump()
        {'name': 'billable'}
    """

    model_config = ConfigDict(
        # Decimal, datetime and nested entities
        arbitrary_types_allowed=True,
        # Grouped rows are updated in place while merging
        validate_assignment=True,
        strict=False,
        extra="forbid",
        frozen=False,
    )
