"""Exception hierarchy for floorplan-sync."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from floorplan_sync.models.property import PropertyConfig


class SyncError(Exception):
    """Base exception for all sync errors."""


class ConfigError(SyncError):
    """Raised when property configuration or settings are invalid or missing."""


class _HttpStatusError(SyncError):
    """Non-success HTTP response from a remote API."""

    service = "HTTP"

    def __init__(self, status_code: int, body: str = "", reason: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.reason = reason
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"{self.service} API failed: {status} - {body}")


class UpstreamError(_HttpStatusError):
    """Raised when the Entrata API returns a non-2xx response."""

    service = "Entrata"


class DestinationError(_HttpStatusError):
    """Raised when the Webflow API returns a non-2xx response."""

    service = "Webflow"


def _label(config: "PropertyConfig") -> str:
    if config.name:
        return f"{config.name} ({config.entrata_property_id})"
    return config.entrata_property_id


class SyncRunError(SyncError):
    """
    Raised at the end of a run when one or more properties failed.
    `failures` lists (property config, error) pairs in sync order.
    """

    def __init__(self, failures: "list[tuple[PropertyConfig, Exception]]", report=None):
        self.failures = list(failures)
        self.report = report
        details = "; ".join(f"{_label(config)}: {err}" for config, err in self.failures)
        super().__init__(f"{len(self.failures)} property sync(s) failed: {details}")
