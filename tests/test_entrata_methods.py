"""Unit tests for Entrata method presets."""

import pytest

from floorplan_sync.connectors.entrata.methods import METHODS, EntrataMethod, get_method
from floorplan_sync.exceptions import ConfigError


class TestMethods:
    """Tests for METHODS and get_method."""

    def test_default_floorplans(self) -> None:
        """Default preset uses the plural property-id parameter."""
        method = get_method("floorplans")
        assert method.resource == "floorplans"
        assert method.name == "getFloorPlans"
        assert method.property_id_param == "propertyIds"

    def test_case_insensitive(self) -> None:
        assert get_method("UNITS") is METHODS["units"]

    def test_unknown_raises(self) -> None:
        with pytest.raises(ConfigError, match="Unknown Entrata method: merx"):
            get_method("merx")

    def test_params_flags(self) -> None:
        """Availability and pricing flags are included unless disabled."""
        assert get_method("units").params("7") == {
            "propertyId": "7",
            "includeAvailability": True,
            "includePricing": True,
        }
        bare = EntrataMethod("r", "m", include_availability=False, include_pricing=False)
        assert bare.params("7") == {"propertyId": "7"}

    def test_all_presets_distinct(self) -> None:
        """Each preset is a different resource/method/param combination."""
        combos = {(m.resource, m.name, m.property_id_param) for m in METHODS.values()}
        assert len(combos) == len(METHODS)
