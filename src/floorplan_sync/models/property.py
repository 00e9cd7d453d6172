"""Per-property sync configuration."""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class PropertyConfig(BaseModel):
    """One managed property: where to read it from and which collection to write to."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    entrata_property_id: str = Field(
        ...,
        validation_alias=AliasChoices("entrataPropertyId", "sourcePropertyId", "entrata_property_id"),
        min_length=1,
    )
    webflow_site_id: str = Field(
        ...,
        validation_alias=AliasChoices("webflowSiteId", "destSiteId", "webflow_site_id"),
        min_length=1,
    )
    webflow_collection_id: str = Field(
        ...,
        validation_alias=AliasChoices("webflowCollectionId", "destCollectionId", "webflow_collection_id"),
        min_length=1,
    )
    name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("name", "displayName"),
        description="Friendly name for logs",
    )

    @field_validator("entrata_property_id", "webflow_site_id", "webflow_collection_id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        # Entrata property ids are often written as bare numbers in JSON
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def display_name(self) -> str:
        return self.name or self.entrata_property_id
