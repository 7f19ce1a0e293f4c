"""Tests for storage notification parsing."""

import json

from rag_service.core.document_processing.lambda_utils.event_parser import parse_storage_event


def _s3_record(bucket: str = "docs-bucket", key: str = "doc1.txt", size: int = 10) -> dict:
    return {
        "eventSource": "aws:s3",
        "eventName": "ObjectCreated:Put",
        "s3": {"bucket": {"name": bucket}, "object": {"key": key, "size": size}},
    }


class TestParseStorageEvent:
    """Test parse_storage_event."""

    def test_direct_s3_event(self) -> None:
        """Should parse direct S3 notification records."""
        event = {"Records": [_s3_record(key="a.txt"), _s3_record(key="b.pdf", size=99)]}

        parsed = parse_storage_event(event)

        assert [location.key for location in parsed.locations] == ["a.txt", "b.pdf"]
        assert parsed.locations[1].size == 99
        assert parsed.locations[0].bucket == "docs-bucket"
        assert parsed.errors == []

    def test_key_url_decoded_with_plus_as_space(self) -> None:
        """Should decode percent-escapes and treat + as a space."""
        event = {"Records": [_s3_record(key="my+folder/annual%28final%29+report.pdf")]}

        parsed = parse_storage_event(event)

        assert parsed.locations[0].key == "my folder/annual(final) report.pdf"

    def test_sqs_wrapped_event(self) -> None:
        """Should unwrap S3 notifications delivered through SQS."""
        body = json.dumps({"Records": [_s3_record(key="queued.txt")]})
        event = {"Records": [{"eventSource": "aws:sqs", "messageId": "m-1", "body": body}]}

        parsed = parse_storage_event(event)

        assert [location.key for location in parsed.locations] == ["queued.txt"]

    def test_bad_records_do_not_stop_batch(self) -> None:
        """Should report unparseable records and keep the valid ones."""
        event = {
            "Records": [
                {"eventSource": "aws:sqs", "messageId": "m-bad", "body": "{not json"},
                {"eventSource": "aws:dynamodb"},
                _s3_record(key="good.txt"),
                _s3_record(key=""),
            ]
        }

        parsed = parse_storage_event(event)

        assert [location.key for location in parsed.locations] == ["good.txt"]
        assert len(parsed.errors) == 3
        assert parsed.errors[0].record_id == "m-bad"
        assert "Invalid JSON" in parsed.errors[0].error

    def test_empty_event(self) -> None:
        """Should return nothing for an event without records."""
        parsed = parse_storage_event({})

        assert parsed.locations == []
        assert parsed.errors == []
