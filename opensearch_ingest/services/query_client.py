import logging
from typing import Any

from opensearch_ingest.dtos.query_spec import QuerySpec
from opensearch_ingest.opensearch.abstract_classes import ABCClient
from opensearch_ingest.opensearch.transport_errors import translate_errors

logger = logging.getLogger(__name__)


class QueryClient:
    """
    Single-shot search against an index using Lucene query string syntax.
    """

    def __init__(self, client: ABCClient):
        """
            Class constructor inject the required dependencies via the parameters
        Args:
            client (ABCClient): An instance of ABCClient to interact with OpenSearch.
        """
        self._client = client

    def build_params(self, spec: QuerySpec) -> dict:
        """Translate a QuerySpec into search URL parameters.

        Filter syntax: https://lucene.apache.org/core/2_9_4/queryparsersyntax.html
        """
        return {
            "q": spec.query,
            "sort": list(spec.sort),
            "size": spec.size,
            "request_cache": not spec.bypass_cache,
            "pretty": True,
        }

    def search(self, index: str, spec: QuerySpec) -> Any:
        """Run one search request and return the response body unmodified.

        Args:
            index (str): The name of the index to search.
            spec (QuerySpec): Filter, sort, size and cache flag.

        Returns:
            The response body as returned by the client: decoded JSON, so the
            pretty-printed layout requested on the wire is not preserved.

        Raises:
            ServerError: Non-success status; carries status code and body.
            TransportError: No response was received.
        """
        params = self.build_params(spec)
        logger.info("Searching %s with %s", index, params)
        os_client = self._client.get_client()
        with translate_errors("search"):
            return os_client.search(index=index, **params)
