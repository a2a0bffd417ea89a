from typing import TYPE_CHECKING
from urllib.parse import urlparse

import boto3
from opensearchpy import OpenSearch, RequestsHttpConnection
from requests_aws4auth import AWS4Auth

from .abstract_classes import ABCClient

if TYPE_CHECKING:
    from opensearch_ingest.global_config import GlobalConfig


class OpenSearchClient(ABCClient):
    """OpenSearch client provider built from a ``GlobalConfig``.

    Each instance lazily builds and caches its own ``OpenSearch`` client, so
    the handle is passed explicitly to the components that need it instead of
    living in a process-wide singleton.
    """

    def __init__(self, config: "GlobalConfig"):
        """Initialize the OpenSearchClient.

        Args:
            config (GlobalConfig): Endpoint, credentials and TLS settings.
        """
        self.config = config
        self._client: OpenSearch | None = None

    def get_client(self) -> OpenSearch:
        """Get the OpenSearch client instance.

        Returns:
            OpenSearch: The OpenSearch client instance.
        """
        if self._client is None:
            self._client = OpenSearch(
                hosts=[self.config.open_search_endpoint],
                http_auth=self._build_auth(),
                use_ssl=self.use_ssl,
                verify_certs=self.config.open_search_verify_certs,
                ssl_show_warn=self.config.open_search_verify_certs,
                connection_class=RequestsHttpConnection,
                timeout=self.config.request_timeout,
                # a resent bulk page would create its documents twice
                max_retries=0,
                retry_on_status=(),
                retry_on_timeout=False,
            )

        return self._client

    @property
    def use_ssl(self) -> bool:
        return urlparse(self.config.open_search_endpoint).scheme == "https"

    def _build_auth(self):
        """Return basic-auth credentials, or a SigV4 signer when a region is set."""
        if not self.config.aws_region:
            return (
                self.config.open_search_master_user_name,
                self.config.open_search_master_user_password,
            )

        session = boto3.Session()
        credentials = session.get_credentials()
        service = "es"

        return AWS4Auth(
            credentials.access_key,
            credentials.secret_key,
            self.config.aws_region,
            service,
            session_token=credentials.token,
        )
