"""Raw upstream record representation before normalization."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SourceRecord(BaseModel):
    """
    Flexible raw record from Entrata.
    Depending on the method used this is a unit, a unit type or a floorplan;
    key names and casing vary between API variants.
    """

    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] = Field(default_factory=dict)
