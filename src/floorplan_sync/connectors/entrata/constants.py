"""Entrata record key aliases and classification keywords."""

# Candidate keys per canonical field, in priority order.
# Matching is exact first, then case-insensitive.
NAME_KEYS = (
    "name",
    "floorplanName",
    "floorPlanName",
    "FloorplanName",
    "unitTypeName",
    "marketingName",
    "unitNumber",
)
BEDROOM_KEYS = ("bedrooms", "beds", "bedroomCount", "numberOfBedrooms", "unitBedrooms", "bedRooms")
BATHROOM_KEYS = ("bathrooms", "baths", "bathroomCount", "numberOfBathrooms", "unitBathrooms", "bathRooms")
SQFT_KEYS = ("squareFeet", "sqft", "squareFootage", "minSquareFeet", "minSqft", "area")
MIN_PRICE_KEYS = (
    "minRent",
    "minPrice",
    "startingPrice",
    "startingRent",
    "minMarketRent",
    "marketRent",
    "rent",
    "price",
)
MAX_PRICE_KEYS = ("maxRent", "maxPrice", "maxMarketRent", "marketRent", "rent", "price")
AVAILABLE_UNITS_KEYS = (
    "availableUnits",
    "unitsAvailable",
    "availableUnitCount",
    "availableUnitsCount",
    "availableCount",
)
TOTAL_UNITS_KEYS = ("totalUnits", "unitCount", "totalUnitCount", "numberOfUnits", "unitsTotal")
IMAGE_KEYS = ("imageUrl", "imageURL", "floorplanImage", "floorPlanImageUrl", "image", "photoUrl", "fileUrl")
ROOM_KEYS = ("Room", "rooms")

FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "name": NAME_KEYS,
    "bedrooms": BEDROOM_KEYS,
    "bathrooms": BATHROOM_KEYS,
    "square_feet": SQFT_KEYS,
    "min_price": MIN_PRICE_KEYS,
    "max_price": MAX_PRICE_KEYS,
    "available_units": AVAILABLE_UNITS_KEYS,
    "total_units": TOTAL_UNITS_KEYS,
    "image_url": IMAGE_KEYS,
}

# First match wins
LAYOUT_KEYWORDS = ("corner", "townhouse", "flat", "penthouse", "loft", "studio")

TIER_ELITE_KEYWORD = "elite"
TIER_SIGNATURE_KEYWORD = "signature"

DEFAULT_LAYOUT = "Standard"
