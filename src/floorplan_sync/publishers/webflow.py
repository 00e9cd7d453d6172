"""Webflow CMS bulk item publisher with fixed inter-batch pacing."""

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Literal, Optional, Sequence, TypeVar

import httpx

from floorplan_sync.exceptions import DestinationError
from floorplan_sync.models.item import DestinationItem

if TYPE_CHECKING:
    from floorplan_sync.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Webflow bulk endpoints accept at most 100 items per request
MAX_BATCH_SIZE = 100
# Min delay between batch requests (seconds)
DEFAULT_BATCH_DELAY = 1.0


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most `size` items."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield items[start : start + size]


@dataclass
class PublishResult:
    """Outcome of publishing one property's items."""

    batches_sent: int = 0
    items_sent: int = 0
    items_created: int = 0


class WebflowPublisher:
    """
    Creates items in a Webflow collection via the v2 bulk endpoint.
    Always inserts: existing items are never looked up or updated.
    """

    API_BASE = "https://api.webflow.com/v2"

    def __init__(
        self,
        api_token: str,
        *,
        client: Optional[httpx.Client] = None,
        batch_size: int = MAX_BATCH_SIZE,
        batch_delay: float = DEFAULT_BATCH_DELAY,
        write_mode: Literal["staged", "live"] = "staged",
        timeout: float = 30.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if not 1 <= batch_size <= MAX_BATCH_SIZE:
            raise ValueError(f"batch_size must be between 1 and {MAX_BATCH_SIZE}, got {batch_size}")
        self._api_token = api_token
        self._client = client or httpx.Client(timeout=timeout)
        self.batch_size = batch_size
        self.batch_delay = batch_delay
        self.write_mode = write_mode
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: "Settings", client: Optional[httpx.Client] = None) -> "WebflowPublisher":
        return cls(
            settings.webflow_api_token,
            client=client,
            batch_size=settings.batch_size,
            batch_delay=settings.batch_delay,
            write_mode=settings.write_mode,
            timeout=settings.timeout,
        )

    def endpoint(self, collection_id: str) -> str:
        url = f"{self.API_BASE}/collections/{collection_id}/items"
        return url + "/live" if self.write_mode == "live" else url

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json",
            "accept": "application/json",
        }

    def _send_batch(self, collection_id: str, batch: Sequence[DestinationItem]) -> int:
        """POST one batch; returns the number of items the API reports as created."""
        response = self._client.post(
            self.endpoint(collection_id),
            json={"items": [item.to_payload() for item in batch]},
            headers=self._headers(),
        )
        if not response.is_success:
            raise DestinationError(response.status_code, response.text, response.reason_phrase)
        try:
            created = response.json().get("items")
        except (ValueError, AttributeError):
            created = None
        return len(created) if isinstance(created, list) else len(batch)

    def publish(self, collection_id: str, items: Sequence[DestinationItem]) -> PublishResult:
        """
        Send items in batches, sleeping `batch_delay` between batches.
        The first failing batch raises DestinationError; later batches are
        not sent and earlier ones are not rolled back.
        """
        result = PublishResult()
        if not items:
            logger.info("No items to publish to collection %s", collection_id)
            return result

        batches = list(chunked(items, self.batch_size))
        for number, batch in enumerate(batches, 1):
            logger.info("Publishing batch %d/%d (%d items)", number, len(batches), len(batch))
            created = self._send_batch(collection_id, batch)
            result.batches_sent += 1
            result.items_sent += len(batch)
            result.items_created += created
            logger.info("Batch %d published: %d items", number, created)

            if number < len(batches):
                self._sleep(self.batch_delay)

        return result
