"""Canonical Webflow CMS item produced from an Entrata record."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Number = int | float


class DestinationItem(BaseModel):
    """
    One CMS item. Field aliases are the Webflow collection field slugs,
    so `to_field_data()` can be sent as-is.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., serialization_alias="name")
    slug: str = Field(..., min_length=1, serialization_alias="slug")

    bedrooms: Number = Field(0, serialization_alias="bedrooms")
    bathrooms: Number = Field(0, serialization_alias="bathrooms")
    square_feet: Number = Field(0, serialization_alias="square-feet")

    min_price: Number = Field(0, serialization_alias="starting-price")
    max_price: Number = Field(0, serialization_alias="max-price")
    price_per_bed: int = Field(0, serialization_alias="price-per-bed")

    available_units: int = Field(0, serialization_alias="available-units")
    total_units: int = Field(0, serialization_alias="total-units")
    availability_status: Literal["available", "sold-out"] = Field(
        "sold-out", serialization_alias="availability-status"
    )

    layout_type: str = Field("Standard", serialization_alias="layout-type")
    tier_signature: bool = Field(False, serialization_alias="tier-signature")
    tier_elite: bool = Field(False, serialization_alias="tier-elite")

    image_url: str = Field("", serialization_alias="image-url")
    property_id: str = Field("", serialization_alias="property-id")
    property_name: str = Field("", serialization_alias="property-name")
    last_synced: str = Field("", serialization_alias="last-synced")

    def to_field_data(self) -> dict[str, Any]:
        """Flat field map keyed by Webflow field slug."""
        return self.model_dump(mode="json", by_alias=True)

    def to_payload(self, *, is_draft: bool = False, is_archived: bool = False) -> dict[str, Any]:
        """Item body for the Webflow v2 bulk items endpoint."""
        return {
            "isArchived": is_archived,
            "isDraft": is_draft,
            "fieldData": self.to_field_data(),
        }
