"""
Lambda helpers: event parsing, environment validation and parse errors.
"""

from .event_parser import ParsedStorageEvent, UnparseableRecord, parse_s3_record, parse_storage_event
from .exceptions import MessageParseError

__all__ = [
    "ParsedStorageEvent",
    "UnparseableRecord",
    "parse_s3_record",
    "parse_storage_event",
    "MessageParseError",
]
