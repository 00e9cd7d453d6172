#!/usr/bin/env python3
"""Quick live check of the Entrata fetch + normalize flow (nothing is published).

Run:
  poetry run python scripts/check_entrata_live.py 123456              # default method
  poetry run python scripts/check_entrata_live.py 123456 unit-types   # another preset
  poetry run python scripts/check_entrata_live.py 123456 all          # every preset

Needs ENTRATA_API_KEY, ENTRATA_BASE_URL and ENTRATA_ORG in the environment.
"""

import sys

from floorplan_sync.config import Settings
from floorplan_sync.connectors.entrata import METHODS, EntrataConnector
from floorplan_sync.exceptions import SyncError
from floorplan_sync.models.property import PropertyConfig


def main() -> None:
    if len(sys.argv) < 2:
        raise SystemExit(__doc__)
    property_id = sys.argv[1]
    method_arg = sys.argv[2] if len(sys.argv) > 2 else None

    settings = Settings.from_env(require_properties=False)
    settings.require_secrets(destination=False)
    methods = list(METHODS) if method_arg == "all" else [method_arg or settings.entrata_method]
    config = PropertyConfig(
        entrata_property_id=property_id,
        webflow_site_id="preview",
        webflow_collection_id="preview",
    )

    for method in methods:
        connector = EntrataConnector(
            settings.entrata_api_key,
            settings.entrata_base_url,
            settings.entrata_org,
            method=method,
            timeout=settings.timeout,
        )
        print(f"Fetching property {property_id} with {method} ({connector.endpoint})...")
        try:
            records = connector.fetch(property_id)
        except SyncError as e:
            print(f"  Failed: {e}")
            continue
        print(f"  Got {len(records)} records")
        for i, record in enumerate(records[:5], 1):
            item = connector.normalize(record, config)
            print(f"  {i}. {item.name} -> {item.slug} (${item.min_price}, {item.available_units} available)")


if __name__ == "__main__":
    main()
