"""Extra display columns and user preferences contributed by subscribers."""

from typing import Any, Optional

from pydantic import Field

from ggsa_export.models.base import BaseDataModel


class MetaField(BaseDataModel):
    """An extra display column for one entity kind.

    Attributes:
        name: Key used to look the value up in an entity's ``meta`` mapping
        label: Column header
        type: Value type hint for the template
        visible: Whether the column is shown
        value: Default value when an entity has none
    """

    name: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    type: str = "text"
    visible: bool = True
    value: Optional[str] = None


class UserPreference(BaseDataModel):
    """A user preference shown in the export header."""

    name: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    value: Any = None
    type: str = "text"
