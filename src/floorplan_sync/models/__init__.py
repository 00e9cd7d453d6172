"""Data models for property configs, source records and CMS items."""

from floorplan_sync.models.item import DestinationItem
from floorplan_sync.models.property import PropertyConfig
from floorplan_sync.models.raw import SourceRecord

__all__ = ["DestinationItem", "PropertyConfig", "SourceRecord"]
