import json
from contextlib import contextmanager
from typing import Any, Iterator

from opensearchpy import exceptions as os_exceptions

from opensearch_ingest.errors import EncodingError, ServerError, TransportError


def raw_body(info: Any) -> str:
    """Return a response body as text.

    opensearch-py hands back the decoded JSON body when it could parse it and
    the raw string otherwise. Decoded bodies are re-encoded, so the text is
    equivalent JSON rather than the exact bytes the server sent.
    """
    if info is None:
        return ""
    if isinstance(info, (dict, list)):
        return json.dumps(info, ensure_ascii=False)
    return str(info)


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Map opensearch-py exceptions raised inside the block onto our own.

    Args:
        operation (str): Name of the request, used in error messages.

    Raises:
        TransportError: No response was received (connection, TLS, timeout).
        ServerError: The server answered with a non-success status.
        EncodingError: The client could not serialize the request.
    """
    try:
        yield
    except os_exceptions.ConnectionError as exc:
        raise TransportError(f"{operation} failed: {exc}") from exc
    except os_exceptions.SerializationError as exc:
        raise EncodingError(f"{operation} failed to serialize request: {exc}") from exc
    except os_exceptions.TransportError as exc:
        raise ServerError(
            operation, status_code=exc.status_code, body=raw_body(exc.info)
        ) from exc
