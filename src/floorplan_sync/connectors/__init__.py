"""Source connectors for property data ingestion."""

from floorplan_sync.connectors.base import BaseConnector

__all__ = ["BaseConnector"]
