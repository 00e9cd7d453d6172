"""Parsing utilities for loosely shaped Entrata records."""

import math
import re
from typing import Any, Iterable, Mapping, Optional

from .constants import DEFAULT_LAYOUT, LAYOUT_KEYWORDS, ROOM_KEYS

_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")
# Stripped before parsing: thousands separators, currency, whitespace
_NUMBER_NOISE = re.compile(r"[,$\s]")


def _unwrap(value: Any, bound: Optional[str] = None) -> Any:
    """
    Reduce XML-to-JSON wrappers to a scalar.
    {"@attributes": {"Min": "1,200", "Max": "1,500"}} -> "1,200" for bound="Min";
    {"value": 3} -> 3.
    """
    if not isinstance(value, dict):
        return value
    if isinstance(value.get("@attributes"), dict):
        value = value["@attributes"]
    lowered = {str(k).lower(): v for k, v in value.items()}
    if bound and bound.lower() in lowered:
        return _unwrap(lowered[bound.lower()])
    if "value" in lowered:
        return _unwrap(lowered["value"])
    return None


def probe(data: Mapping[str, Any], keys: Iterable[str], bound: Optional[str] = None) -> Any:
    """
    Return the first present, non-None value among `keys`.
    Exact key names are tried first, then a case-insensitive pass.
    """
    keys = tuple(keys)
    for key in keys:
        if key in data:
            value = _unwrap(data[key], bound)
            if value is not None:
                return value
    lowered = {str(k).lower(): k for k in data}
    for key in keys:
        original = lowered.get(key.lower())
        if original is not None:
            value = _unwrap(data[original], bound)
            if value is not None:
                return value
    return None


def to_number(value: Any) -> int | float:
    """
    Coerce a number or numeric-looking string to int/float; 0 when not numeric.
    "1,250" -> 1250, "$1,200 - $1,500" -> 1200, "1.5" -> 1.5.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        match = _NUMBER.search(_NUMBER_NOISE.sub("", value))
        if not match:
            return 0
        number = float(match.group(0))
    else:
        return 0
    if isinstance(number, float):
        if math.isnan(number) or math.isinf(number):
            return 0
        if number.is_integer():
            return int(number)
    return number


def to_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def count_rooms(data: Mapping[str, Any], room_type: str) -> Optional[int | float]:
    """
    Count rooms from a MITS-style Room list:
    [{"@attributes": {"RoomType": "Bedroom", "Count": 2}}, ...].
    """
    rooms = next((data[key] for key in ROOM_KEYS if key in data), None)
    if isinstance(rooms, dict):
        rooms = [rooms]
    if not isinstance(rooms, list):
        return None
    for room in rooms:
        if not isinstance(room, dict):
            continue
        attrs = room.get("@attributes", room)
        if not isinstance(attrs, dict):
            continue
        kind = to_text(attrs.get("RoomType") or attrs.get("roomType")).lower()
        if kind == room_type.lower():
            return to_number(attrs.get("Count", attrs.get("count")))
    return None


def kebab(value: str) -> str:
    """Lowercase and collapse runs of non-alphanumerics to single hyphens."""
    return _NON_ALNUM.sub("-", value.lower()).strip("-")


def layout_type(name: str) -> str:
    """First layout keyword found in the name, else the name, else 'Standard'."""
    lowered = name.lower()
    for keyword in LAYOUT_KEYWORDS:
        if keyword in lowered:
            return keyword.title()
    return name.strip() or DEFAULT_LAYOUT


def format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def build_slug(bedrooms: int | float, layout: str) -> str:
    """
    `{bedrooms}bed-{kebab layout}`; never empty and URL-safe.
    Negative counts slug as 0, fractional ones hyphenated (1.5 -> "1-5bed-...").
    """
    count = kebab(format_number(max(bedrooms, 0)))
    return f"{count}bed-{kebab(layout) or kebab(DEFAULT_LAYOUT)}"


def price_per_bed(min_price: int | float, bedrooms: int | float) -> int:
    """min_price / bedrooms rounded half up; 0 unless both are positive."""
    if min_price > 0 and bedrooms > 0:
        return int(math.floor(min_price / bedrooms + 0.5))
    return 0
