"""Destination publishers for normalized items."""

from floorplan_sync.publishers.webflow import PublishResult, WebflowPublisher, chunked

__all__ = ["PublishResult", "WebflowPublisher", "chunked"]
