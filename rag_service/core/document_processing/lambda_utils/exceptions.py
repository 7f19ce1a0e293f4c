"""
Exceptions for Lambda storage-event handling.
"""


class MessageParseError(Exception):
    """Raised when a notification record cannot be parsed into a document location."""

    def __init__(self, message: str, record_id: str | None = None) -> None:
        self.record_id = record_id
        super().__init__(message)
