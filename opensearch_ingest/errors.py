"""Exception hierarchy for bulk ingestion, index settings and queries.

Every failure raised by this package derives from :class:`IngestionError` so
callers can catch one type, while the subclasses keep the categories apart:
configuration problems are raised before any request is sent, encoding
problems abort a page before submission, and transport/server problems carry
what the server said. Errors raised by a bulk load also carry the page that
failed and how many documents were committed before it.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Sequence

__all__ = [
    "IngestionError",
    "ConfigurationError",
    "EncodingError",
    "TransportError",
    "ServerError",
    "BulkItemError",
    "StateTransitionError",
]


class IngestionError(RuntimeError):
    """Base exception for everything raised by the ingestion and query components."""

    def __init__(
        self,
        message: str,
        *,
        page_number: Optional[int] = None,
        documents_loaded: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.page_number = page_number
        self.documents_loaded = documents_loaded
        self.cleanup_error: Optional["IngestionError"] = None

    def with_progress(self, *, page_number: int, documents_loaded: int) -> "IngestionError":
        """Record where in a bulk load the error happened and return ``self``."""

        self.page_number = page_number
        self.documents_loaded = documents_loaded
        return self

    def __str__(self) -> str:
        text = self.message
        if self.page_number is not None:
            text = f"{text} (page {self.page_number}, documents loaded: {self.documents_loaded})"
        if self.cleanup_error is not None:
            text = f"{text}; additionally: {self.cleanup_error}"
        return text


class ConfigurationError(IngestionError):
    """Raised when page size, document count or other inputs are invalid."""


class EncodingError(IngestionError):
    """Raised when a document cannot be serialized into the bulk payload."""


class TransportError(IngestionError):
    """Raised when the request never got a response (connection, TLS, timeout)."""


class ServerError(IngestionError):
    """Raised when the server answered with a non-success status.

    Args:
        operation: Short name of the request that failed, e.g. ``"bulk"``.
        status_code: HTTP status returned by the server.
        body: Response body as text. When the client decoded it as JSON it is
            re-encoded with ``json.dumps``, so the content is the server's but
            whitespace and key spacing may differ from the bytes on the wire.
    """

    def __init__(self, operation: str, *, status_code: Any, body: str, **kwargs) -> None:
        super().__init__(
            f"{operation} failed: status_code: {status_code}, body: {body}", **kwargs
        )
        self.operation = operation
        self.status_code = status_code
        self.body = body


class BulkItemError(ServerError):
    """Raised when a bulk response succeeded but rejected some of its items."""

    def __init__(self, *, body: str, failed_items: Sequence[dict], **kwargs) -> None:
        super().__init__("bulk", status_code=200, body=body, **kwargs)
        self.failed_items = list(failed_items)
        self.message = f"bulk rejected {len(self.failed_items)} item(s): {self._sample()}"

    def _sample(self) -> str:
        # a couple of items is enough to diagnose, the full body is on .body
        return json.dumps(self.failed_items[:3], ensure_ascii=False)


class StateTransitionError(IngestionError):
    """Raised when refresh could not be re-enabled after a load attempt.

    The index may be left with refresh disabled, so this is reported apart
    from any load failure.
    """

    def __init__(self, index: str, cause: IngestionError) -> None:
        super().__init__(f"failed to re-enable refresh on index '{index}': {cause}")
        self.index = index
        self.cause = cause
