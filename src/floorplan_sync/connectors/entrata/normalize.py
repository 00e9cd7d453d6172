"""Map Entrata records onto the canonical Webflow item."""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from floorplan_sync.models.item import DestinationItem
from floorplan_sync.models.property import PropertyConfig
from floorplan_sync.models.raw import SourceRecord

from .constants import (
    AVAILABLE_UNITS_KEYS,
    BATHROOM_KEYS,
    BEDROOM_KEYS,
    FIELD_KEYS,
    IMAGE_KEYS,
    MAX_PRICE_KEYS,
    MIN_PRICE_KEYS,
    NAME_KEYS,
    SQFT_KEYS,
    TIER_ELITE_KEYWORD,
    TIER_SIGNATURE_KEYWORD,
    TOTAL_UNITS_KEYS,
)
from .parsers import build_slug, count_rooms, layout_type, price_per_bed, probe, to_number, to_text

DEFAULT_ELITE_PRICE_PER_BED = 900

# Canonical fields that may also come from a Room list
_ROOM_FIELDS = {"bedrooms": "Bedroom", "bathrooms": "Bathroom"}
# Price and size ranges: which bound of a {"Min", "Max"} wrapper to take
_BOUNDS = {"min_price": "Min", "max_price": "Max", "square_feet": "Min"}


def _data(record: SourceRecord | Mapping[str, Any]) -> Mapping[str, Any]:
    return record.data if isinstance(record, SourceRecord) else record


def _number(data: Mapping[str, Any], keys: tuple[str, ...], bound: Optional[str] = None) -> int | float:
    return to_number(probe(data, keys, bound))


def _tiers(name: str, per_bed: int, elite_threshold: int) -> tuple[bool, bool]:
    """Return (signature, elite). A name keyword overrides the price threshold."""
    lowered = name.lower()
    if TIER_ELITE_KEYWORD in lowered:
        return False, True
    if TIER_SIGNATURE_KEYWORD in lowered:
        return True, False
    elite = per_bed >= elite_threshold
    return not elite, elite


def normalize_record(
    record: SourceRecord | Mapping[str, Any],
    config: PropertyConfig,
    *,
    now: Optional[datetime] = None,
    elite_price_per_bed: int = DEFAULT_ELITE_PRICE_PER_BED,
) -> DestinationItem:
    """
    Convert one Entrata unit / unit type / floorplan record to a DestinationItem.
    Never raises for missing or malformed fields: numbers default to 0 and
    text to "".
    """
    d = _data(record)

    raw_name = to_text(probe(d, NAME_KEYS))

    bedrooms = _number(d, BEDROOM_KEYS)
    if not bedrooms:
        bedrooms = to_number(count_rooms(d, "Bedroom"))
    bathrooms = _number(d, BATHROOM_KEYS)
    if not bathrooms:
        bathrooms = to_number(count_rooms(d, "Bathroom"))

    square_feet = _number(d, SQFT_KEYS, _BOUNDS["square_feet"])
    min_price = _number(d, MIN_PRICE_KEYS, _BOUNDS["min_price"])
    max_price = _number(d, MAX_PRICE_KEYS, _BOUNDS["max_price"])
    available_units = int(_number(d, AVAILABLE_UNITS_KEYS))
    total_units = int(_number(d, TOTAL_UNITS_KEYS))

    layout = layout_type(raw_name)
    per_bed = price_per_bed(min_price, bedrooms)
    signature, elite = _tiers(raw_name, per_bed, elite_price_per_bed)

    timestamp = (now or datetime.now(timezone.utc)).isoformat()

    return DestinationItem(
        name=raw_name or f"{bedrooms} Bed {layout}",
        slug=build_slug(bedrooms, layout),
        bedrooms=bedrooms,
        bathrooms=bathrooms,
        square_feet=square_feet,
        min_price=min_price,
        max_price=max_price,
        price_per_bed=per_bed,
        available_units=available_units,
        total_units=total_units,
        availability_status="available" if available_units > 0 else "sold-out",
        layout_type=layout,
        tier_signature=signature,
        tier_elite=elite,
        image_url=to_text(probe(d, IMAGE_KEYS)),
        property_id=config.entrata_property_id,
        property_name=config.display_name,
        last_synced=timestamp,
    )


def find_missing_fields(record: SourceRecord | Mapping[str, Any]) -> list[str]:
    """Canonical fields with no usable source value (they normalize to defaults)."""
    d = _data(record)
    missing = []
    for field, keys in FIELD_KEYS.items():
        if probe(d, keys, _BOUNDS.get(field)) is not None:
            continue
        room_type = _ROOM_FIELDS.get(field)
        if room_type and count_rooms(d, room_type) is not None:
            continue
        missing.append(field)
    return missing
