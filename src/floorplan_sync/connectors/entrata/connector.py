"""Entrata connector for floorplan, unit type and unit records.

Entrata's API is JSON-RPC shaped: every call is a POST to
{base_url}/{org}/v1/{resource} with a body naming the method and its params.
The resource, method name and property-id parameter vary between API
variants; see methods.py. Responses are unwrapped by extractors.py.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional, Sequence

import httpx

from floorplan_sync.connectors.base import BaseConnector
from floorplan_sync.exceptions import UpstreamError
from floorplan_sync.models.item import DestinationItem
from floorplan_sync.models.property import PropertyConfig
from floorplan_sync.models.raw import SourceRecord

from .extractors import DEFAULT_EXTRACTORS, Extractor, extract_records
from .methods import EntrataMethod, get_method
from .normalize import DEFAULT_ELITE_PRICE_PER_BED, normalize_record

if TYPE_CHECKING:
    from floorplan_sync.config import Settings

logger = logging.getLogger(__name__)


class EntrataConnector(BaseConnector):
    """
    Connector for the Entrata property-management API.
    One request per property: no pagination, no retry.
    """

    source_id = "entrata"

    DEFAULT_HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        api_key: str,
        base_url: str,
        org: str,
        *,
        method: str | EntrataMethod = "floorplans",
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
        extractors: Sequence[Extractor] = DEFAULT_EXTRACTORS,
        elite_price_per_bed: int = DEFAULT_ELITE_PRICE_PER_BED,
    ):
        """
        Args:
            api_key: Entrata API key, sent as X-Api-Key
            base_url: API base URL (e.g. https://apis.entrata.com/ext)
            org: Organization (subdomain) segment of the endpoint path
            method: Method preset key or an EntrataMethod
            client: Optional httpx client
            extractors: Ordered response-shape probes
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._org = org
        self.method = get_method(method) if isinstance(method, str) else method
        self.extractors = tuple(extractors)
        self.elite_price_per_bed = elite_price_per_bed
        self._client = client or httpx.Client(timeout=timeout, headers=self.DEFAULT_HEADERS)

    @classmethod
    def from_settings(cls, settings: "Settings", client: Optional[httpx.Client] = None) -> "EntrataConnector":
        return cls(
            settings.entrata_api_key,
            settings.entrata_base_url,
            settings.entrata_org,
            method=settings.entrata_method,
            client=client,
            timeout=settings.timeout,
            elite_price_per_bed=settings.elite_price_per_bed,
        )

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/{self._org}/v1/{self.method.resource}"

    def build_request_body(self, property_id: str) -> dict:
        """JSON-RPC style request body for one property."""
        return {
            "auth": {"type": "apikey"},
            "requestId": "1",
            "method": {
                "name": self.method.name,
                "params": self.method.params(property_id),
            },
        }

    def _post(self, property_id: str) -> httpx.Response:
        response = self._client.post(
            self.endpoint,
            json=self.build_request_body(property_id),
            headers={**self.DEFAULT_HEADERS, "X-Api-Key": self._api_key},
        )
        if not response.is_success:
            raise UpstreamError(response.status_code, response.text, response.reason_phrase)
        return response

    def fetch(self, property_id: str) -> list[SourceRecord]:
        """Fetch records for one property via the configured method."""
        response = self._post(property_id)
        try:
            payload = response.json()
        except ValueError:
            logger.warning(
                "Entrata %s returned a non-JSON body for property %s",
                self.method.name,
                property_id,
            )
            return []
        records = extract_records(payload, self.extractors)
        logger.debug("Entrata %s: %d records for property %s", self.method.name, len(records), property_id)
        return [SourceRecord(data=r) for r in records]

    def normalize(
        self,
        record: SourceRecord,
        config: PropertyConfig,
        now: Optional[datetime] = None,
    ) -> DestinationItem:
        """Convert an Entrata record to a DestinationItem."""
        return normalize_record(record, config, now=now, elite_price_per_bed=self.elite_price_per_bed)
