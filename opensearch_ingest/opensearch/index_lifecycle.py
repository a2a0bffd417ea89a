import logging
from typing import Any

from .abstract_classes import ABCClient
from .index_settings import REFRESH_DISABLED
from .transport_errors import translate_errors

logger = logging.getLogger(__name__)


class IndexLifecycle:
    """Create, delete and list indices.

    These are plain pass-through requests: each returns the raw server
    response and raises the same errors as the loading components.
    """

    def __init__(self, client: ABCClient):
        """
        Args:
            client (ABCClient): Provider of the OpenSearch client.
        """
        self._client = client

    def create_configurations(self) -> dict:
        """Return the settings used for new indices.

        Refresh starts disabled so a fresh index is ready for a bulk load; one
        shard and no replicas keep single-node clusters green.
        """
        return {
            "settings": {
                "index": {
                    "refresh_interval": REFRESH_DISABLED,
                    "number_of_shards": 1,
                    "number_of_replicas": 0,
                }
            }
        }

    def create_index(self, index_name: str) -> Any:
        """Create the index with refresh disabled."""
        logger.info("Creating index %s", index_name)
        os_client = self._client.get_client()
        with translate_errors("create_index"):
            return os_client.indices.create(
                index=index_name, body=self.create_configurations()
            )

    def delete_index(self, index_name: str) -> Any:
        logger.info("Deleting index %s", index_name)
        os_client = self._client.get_client()
        with translate_errors("delete_index"):
            return os_client.indices.delete(index=index_name)

    def list_indices(self) -> Any:
        """List indices with their health, document count and size."""
        os_client = self._client.get_client()
        with translate_errors("list_indices"):
            return os_client.cat.indices(format="json")
