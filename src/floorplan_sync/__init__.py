"""Entrata to Webflow CMS floorplan sync."""

__version__ = "0.1.0"
