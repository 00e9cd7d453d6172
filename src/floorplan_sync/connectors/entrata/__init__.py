"""Entrata property-management API connector."""

from .connector import EntrataConnector
from .extractors import DEFAULT_EXTRACTORS, extract_records, path_probe
from .methods import METHODS, EntrataMethod, get_method
from .normalize import find_missing_fields, normalize_record

__all__ = [
    "DEFAULT_EXTRACTORS",
    "METHODS",
    "EntrataConnector",
    "EntrataMethod",
    "extract_records",
    "find_missing_fields",
    "get_method",
    "normalize_record",
    "path_probe",
]
