"""
S3 and SQS event parsing utilities for Lambda.

Accepts direct S3 notifications and S3 notifications delivered through SQS:

    {"Records": [{"eventSource": "aws:s3",
                  "s3": {"bucket": {"name": "bucket"},
                         "object": {"key": "docs/file+name.txt", "size": 1024}}}]}

    {"Records": [{"eventSource": "aws:sqs", "messageId": "...",
                  "body": "<JSON S3 notification>"}]}
"""

import json
import logging
from typing import Any
from urllib.parse import unquote_plus

from pydantic import BaseModel, Field

from rag_service.core.document_processing.lambda_utils.exceptions import MessageParseError
from rag_service.core.document_processing.models import DocumentLocation

logger = logging.getLogger(__name__)


class UnparseableRecord(BaseModel):
    """Notification record that could not be turned into a document location."""

    record_id: str | None = Field(default=None)
    error: str


class ParsedStorageEvent(BaseModel):
    """Locations found in a notification event plus the records that failed to parse."""

    locations: list[DocumentLocation] = Field(default_factory=list)
    errors: list[UnparseableRecord] = Field(default_factory=list)


def parse_s3_record(s3_record: dict[str, Any]) -> DocumentLocation:
    """
    Parse a single S3 notification record.

    Object keys arrive URL-encoded with spaces as '+'.

    Args:
        s3_record: One entry of an S3 notification's Records array

    Returns:
        DocumentLocation: Bucket and decoded key

    Raises:
        MessageParseError: When the record is not an S3 record or lacks bucket/key
    """
    if s3_record.get("eventSource") != "aws:s3":
        raise MessageParseError(f"Invalid event source: {s3_record.get('eventSource')}")

    s3_info = s3_record.get("s3") or {}
    bucket = (s3_info.get("bucket") or {}).get("name", "")
    object_info = s3_info.get("object") or {}
    key = unquote_plus(object_info.get("key", ""))

    if not bucket:
        raise MessageParseError("Missing S3 bucket name")
    if not key:
        raise MessageParseError("Missing S3 object key")

    return DocumentLocation(bucket=bucket, key=key, size=object_info.get("size") or 0)


def _unwrap_sqs_record(record: dict[str, Any]) -> list[dict[str, Any]]:
    message_body = record.get("body")
    if not message_body:
        raise MessageParseError("Empty message body", record.get("messageId"))
    try:
        s3_event = json.loads(message_body)
    except json.JSONDecodeError as e:
        raise MessageParseError(f"Invalid JSON in message body: {e}", record.get("messageId")) from e

    if not isinstance(s3_event, dict):
        raise MessageParseError("Message body is not an S3 notification", record.get("messageId"))
    if "Records" in s3_event:
        return s3_event.get("Records") or []
    return [s3_event]


def parse_storage_event(event: dict[str, Any]) -> ParsedStorageEvent:
    """
    Extract document locations from a Lambda event.

    Records that cannot be parsed are collected in ``errors`` and do not stop
    the rest of the event from being processed.

    Args:
        event: Lambda event with a Records array

    Returns:
        ParsedStorageEvent: Parsed locations and per-record parse errors
    """
    parsed = ParsedStorageEvent()
    for record in event.get("Records") or []:
        record_id = record.get("messageId") if isinstance(record, dict) else None
        try:
            if not isinstance(record, dict):
                raise MessageParseError("Record is not an object")
            if record.get("eventSource") == "aws:sqs" or "body" in record:
                s3_records = _unwrap_sqs_record(record)
            else:
                s3_records = [record]
            for s3_record in s3_records:
                parsed.locations.append(parse_s3_record(s3_record))
        except MessageParseError as e:
            logger.warning(
                "%s:parse_storage_event - MessageParseError: %s",
                __name__,
                e,
                extra={"record_id": record_id},
            )
            parsed.errors.append(UnparseableRecord(record_id=record_id, error=str(e)))

    logger.info(
        "%s:parse_storage_event - Parsed storage event",
        __name__,
        extra={"locations": len(parsed.locations), "errors": len(parsed.errors)},
    )
    return parsed
