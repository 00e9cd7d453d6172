"""Locating the record array inside an Entrata response.

Entrata wraps results as {"response": {"result": {...}}}, but the key under
`result` differs by method and API version (FloorPlans, unitTypes.unitType,
ILS_Units.Unit, ...). Extractors are tried in order; the first one that
returns a non-empty list wins. Pass a custom list to EntrataConnector to
handle new shapes without touching the fallbacks.
"""

import logging
from typing import Any, Callable, Optional, Sequence

logger = logging.getLogger(__name__)

Extractor = Callable[[dict[str, Any]], Optional[list]]


def path_probe(*keys: str) -> Extractor:
    """Build an extractor returning the list found at result[k1][k2]..., else None."""

    def probe(result: dict[str, Any]) -> Optional[list]:
        node: Any = result
        for key in keys:
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]
        return node if isinstance(node, list) else None

    probe.__name__ = "probe_" + ".".join(keys)
    return probe


DEFAULT_EXTRACTORS: tuple[Extractor, ...] = (
    path_probe("FloorPlans"),
    path_probe("FloorPlans", "FloorPlan"),
    path_probe("floorPlans"),
    path_probe("floorplans"),
    path_probe("unitTypes", "unitType"),
    path_probe("UnitTypes", "UnitType"),
    path_probe("units", "unit"),
    path_probe("ILS_Units", "Unit"),
    path_probe("Units", "Unit"),
    path_probe("units"),
    path_probe("Properties", "Property"),
)


def _first_array_property(result: dict[str, Any]) -> Optional[list]:
    for value in result.values():
        if isinstance(value, list):
            return value
    return None


def _records_only(items: list) -> list[dict[str, Any]]:
    return [item for item in items if isinstance(item, dict)]


def extract_records(
    payload: Any,
    extractors: Sequence[Extractor] = DEFAULT_EXTRACTORS,
) -> list[dict[str, Any]]:
    """
    Return the record list from a decoded Entrata response.
    Order: configured extractors, then the first list-valued key of
    `result`, then a non-empty object result as a single record, else [].
    """
    if not isinstance(payload, dict):
        return []
    response = payload.get("response")
    if not isinstance(response, dict):
        return []
    if response.get("error"):
        logger.warning("Entrata returned an error payload: %s", response["error"])

    result = response.get("result")
    if isinstance(result, list):
        return _records_only(result)
    if not isinstance(result, dict):
        return []

    for extractor in extractors:
        found = extractor(result)
        if found:
            logger.debug("Records located by %s", getattr(extractor, "__name__", extractor))
            return _records_only(found)

    found = _first_array_property(result)
    if found is not None:
        return _records_only(found)

    if result:
        return [result]
    return []
