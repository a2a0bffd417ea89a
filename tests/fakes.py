from typing import Any, Dict, List
from unittest.mock import MagicMock

from opensearchpy import exceptions as os_exceptions

from opensearch_ingest.generators.abstract_classes import ABCDocumentSource
from opensearch_ingest.opensearch.abstract_classes import ABCClient


class FakeClient(ABCClient):
    """ABCClient handing out a MagicMock in place of the opensearch-py client."""

    def __init__(self):
        self.os_client = MagicMock(name="OpenSearch")
        self.os_client.bulk.return_value = {"took": 3, "errors": False, "items": []}
        self.os_client.indices.put_settings.return_value = {"acknowledged": True}

    def get_client(self):
        return self.os_client


class CountingDocumentSource(ABCDocumentSource):
    """Produces numbered plain-dict documents and records each batch size."""

    def __init__(self):
        self.batch_sizes: List[int] = []
        self.produced = 0

    def next_batch(self, count: int) -> List[Dict[str, Any]]:
        self.batch_sizes.append(count)
        batch = [{"Seq": self.produced + i, "Age": 18} for i in range(count)]
        self.produced += count
        return batch


def server_error(status: int = 500, info: Any = None) -> os_exceptions.TransportError:
    info = info if info is not None else {"error": {"type": "mapper_parsing_exception"}, "status": status}
    return os_exceptions.TransportError(status, "mapper_parsing_exception", info)


def connection_error() -> os_exceptions.ConnectionError:
    return os_exceptions.ConnectionError("N/A", "connection refused", OSError("refused"))
