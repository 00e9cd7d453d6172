"""Pipeline orchestration: fetch → normalize → publish, one property at a time."""

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from floorplan_sync.config import Settings
from floorplan_sync.connectors.base import BaseConnector
from floorplan_sync.connectors.entrata import EntrataConnector, find_missing_fields
from floorplan_sync.exceptions import SyncError, SyncRunError
from floorplan_sync.models.item import DestinationItem
from floorplan_sync.models.property import PropertyConfig
from floorplan_sync.publishers.webflow import WebflowPublisher

logger = logging.getLogger(__name__)

# Failures that abort one property but not the run
PROPERTY_ERRORS = (SyncError, httpx.HTTPError)


@dataclass
class PropertyResult:
    """Counts for one synced property."""

    name: str
    fetched: int = 0
    published: int = 0
    batches: int = 0


@dataclass
class SyncReport:
    """Outcome of a sync run."""

    results: list[PropertyResult] = field(default_factory=list)
    failures: list[tuple[PropertyConfig, Exception]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def _warn_missing_fields(name: str, records: list) -> None:
    """Log, once per property, which canonical fields had to default."""
    counts: dict[str, int] = {}
    for record in records:
        for missing in find_missing_fields(record):
            counts[missing] = counts.get(missing, 0) + 1
    if counts:
        summary = ", ".join(f"{k}={v}" for k, v in sorted(counts.items()))
        logger.warning("[%s] Defaulted missing fields (records affected): %s", name, summary)


def preview_property(config: PropertyConfig, connector: BaseConnector) -> list[DestinationItem]:
    """Fetch and normalize one property without publishing."""
    records = connector.fetch(config.entrata_property_id)
    _warn_missing_fields(config.display_name, records)
    return [connector.normalize(r, config) for r in records]


def sync_property(
    config: PropertyConfig,
    connector: BaseConnector,
    publisher: WebflowPublisher,
) -> PropertyResult:
    """
    Sync a single property. Errors are logged with the property name and
    re-raised.
    """
    name = config.display_name
    result = PropertyResult(name=name)
    logger.info("[%s] Syncing property", name)
    try:
        logger.info("[%s] Fetching records from Entrata", name)
        records = connector.fetch(config.entrata_property_id)
        result.fetched = len(records)
        logger.info("[%s] Retrieved %d records", name, len(records))

        _warn_missing_fields(name, records)
        items = [connector.normalize(r, config) for r in records]

        logger.info("[%s] Publishing %d items to collection %s", name, len(items), config.webflow_collection_id)
        published = publisher.publish(config.webflow_collection_id, items)
        result.published = published.items_created
        result.batches = published.batches_sent
    except PROPERTY_ERRORS as e:
        logger.error("[%s] Failed to sync property: %s", name, e)
        raise
    logger.info("[%s] Synced %d items", name, result.published)
    return result


def sync_all(
    settings: Settings,
    *,
    connector: Optional[BaseConnector] = None,
    publisher: Optional[WebflowPublisher] = None,
) -> SyncReport:
    """
    Sync every configured property in order.
    A failing property is recorded and the next one still runs; if any
    failed, SyncRunError is raised at the end with all failures. With
    settings.fail_fast the first failure propagates immediately.
    An empty property list is a successful no-op run.
    """
    if not settings.properties:
        logger.info("No properties configured; nothing to sync")
        return SyncReport()
    if connector is None or publisher is None:
        settings.require_secrets()
    connector = connector or EntrataConnector.from_settings(settings)
    publisher = publisher or WebflowPublisher.from_settings(settings)

    logger.info("Found %d property configuration(s)", len(settings.properties))
    report = SyncReport()
    for config in settings.properties:
        try:
            report.results.append(sync_property(config, connector, publisher))
        except PROPERTY_ERRORS as e:
            if settings.fail_fast:
                raise
            report.failures.append((config, e))

    if report.failures:
        logger.error(
            "Sync finished with %d failed of %d properties",
            len(report.failures),
            len(settings.properties),
        )
        raise SyncRunError(report.failures, report)
    logger.info("All properties synced successfully")
    return report
