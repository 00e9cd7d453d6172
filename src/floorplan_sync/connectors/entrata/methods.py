"""Known Entrata API method variants.

Entrata exposes floorplan and unit data through several resources and method
names, and the parameter carrying the property id differs between them
(`propertyId` vs `propertyIds`). Each preset pins one combination.
Add variants here as they are encountered.
"""

from dataclasses import dataclass
from typing import Any

from floorplan_sync.exceptions import ConfigError


@dataclass(frozen=True)
class EntrataMethod:
    """One resource + method + parameter shape for a fetch request."""

    resource: str
    name: str
    property_id_param: str = "propertyId"
    include_availability: bool = True
    include_pricing: bool = True
    description: str = ""

    def params(self, property_id: str) -> dict[str, Any]:
        params: dict[str, Any] = {self.property_id_param: property_id}
        if self.include_availability:
            params["includeAvailability"] = True
        if self.include_pricing:
            params["includePricing"] = True
        return params


# fmt: off
METHODS: dict[str, EntrataMethod] = {
    "floorplans": EntrataMethod(
        "floorplans", "getFloorPlans", "propertyIds",
        description="Floorplans with availability counts and pricing",
    ),
    "properties-floorplans": EntrataMethod(
        "properties", "getFloorPlans",
        description="Floorplans via the properties resource",
    ),
    "unit-types": EntrataMethod(
        "propertyunits", "getUnitTypes",
        description="Unit types (one record per layout)",
    ),
    "units": EntrataMethod(
        "propertyunits", "getUnitsAvailabilityAndPricing",
        description="Individual units with availability and pricing",
    ),
}
# fmt: on


def get_method(key: str) -> EntrataMethod:
    """Look up a method preset by key (case-insensitive)."""
    method = METHODS.get(key.lower())
    if not method:
        raise ConfigError(f"Unknown Entrata method: {key}. Available: {list(METHODS.keys())}")
    return method
