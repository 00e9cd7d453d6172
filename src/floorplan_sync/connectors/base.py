"""Abstract base class for source connectors."""

from abc import ABC, abstractmethod

from floorplan_sync.models.item import DestinationItem
from floorplan_sync.models.property import PropertyConfig
from floorplan_sync.models.raw import SourceRecord


class BaseConnector(ABC):
    """
    Standard interface for property-management source connectors.
    All connectors must implement fetch and normalize.
    """

    source_id: str = ""

    @abstractmethod
    def fetch(self, property_id: str) -> list[SourceRecord]:
        """
        Fetch all records for one property; returns raw format from source.
        """
        pass

    @abstractmethod
    def normalize(self, record: SourceRecord, config: PropertyConfig) -> DestinationItem:
        """
        Convert raw record to DestinationItem.
        """
        pass

    def fetch_all(self, config: PropertyConfig) -> list[DestinationItem]:
        """
        Fetch all records for a property and return normalized list.
        Default implementation: fetch, then normalize each.
        """
        records = self.fetch(config.entrata_property_id)
        return [self.normalize(r, config) for r in records]
