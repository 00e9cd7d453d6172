"""HTTP trigger for the sync pipeline."""

from floorplan_sync.api.app import create_app, run_scheduled_sync

__all__ = ["create_app", "run_scheduled_sync"]
