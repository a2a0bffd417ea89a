from unittest.mock import MagicMock

import pytest
from opensearchpy import RequestsHttpConnection
from opensearchpy import exceptions as os_exceptions

from opensearch_ingest.errors import ServerError, TransportError
from opensearch_ingest.global_config import GlobalConfig
from opensearch_ingest.opensearch import open_search_client
from opensearch_ingest.opensearch.open_search_client import OpenSearchClient
from opensearch_ingest.services.bulk_loader import BulkLoader
from tests.fakes import CountingDocumentSource


def make_config(**overrides) -> GlobalConfig:
    values = {
        "open_search_endpoint": "https://search.example.com:443",
        "open_search_master_user_name": "master",
        "open_search_master_user_password": "pw",
        "open_search_verify_certs": False,
        "aws_region": None,
        "request_timeout": 120,
    }
    values.update(overrides)
    return GlobalConfig(_env_file=None, **values)


def test_basic_auth_client_is_built_once(monkeypatch):
    factory = MagicMock(name="OpenSearch")
    monkeypatch.setattr(open_search_client, "OpenSearch", factory)
    provider = OpenSearchClient(make_config())

    first = provider.get_client()
    second = provider.get_client()

    assert first is second
    factory.assert_called_once()
    kwargs = factory.call_args.kwargs
    assert kwargs["hosts"] == ["https://search.example.com:443"]
    assert kwargs["http_auth"] == ("master", "pw")
    assert kwargs["use_ssl"] is True
    assert kwargs["verify_certs"] is False
    assert kwargs["timeout"] == 120
    assert kwargs["max_retries"] == 0
    assert kwargs["retry_on_status"] == ()
    assert kwargs["retry_on_timeout"] is False


def test_each_provider_owns_its_client(monkeypatch):
    monkeypatch.setattr(open_search_client, "OpenSearch", MagicMock(side_effect=lambda **_: object()))

    first = OpenSearchClient(make_config()).get_client()
    second = OpenSearchClient(make_config()).get_client()

    assert first is not second


def test_plain_http_endpoint_disables_ssl(monkeypatch):
    factory = MagicMock(name="OpenSearch")
    monkeypatch.setattr(open_search_client, "OpenSearch", factory)

    OpenSearchClient(make_config(open_search_endpoint="http://localhost:9200")).get_client()

    assert factory.call_args.kwargs["use_ssl"] is False


def test_aws_region_switches_to_sigv4(monkeypatch):
    factory = MagicMock(name="OpenSearch")
    signer = MagicMock(name="AWS4Auth")
    credentials = MagicMock(access_key="AK", secret_key="SK", token="TOKEN")
    session = MagicMock()
    session.return_value.get_credentials.return_value = credentials
    monkeypatch.setattr(open_search_client, "OpenSearch", factory)
    monkeypatch.setattr(open_search_client, "AWS4Auth", signer)
    monkeypatch.setattr(open_search_client.boto3, "Session", session)

    OpenSearchClient(make_config(aws_region="eu-west-1")).get_client()

    signer.assert_called_once_with("AK", "SK", "eu-west-1", "es", session_token="TOKEN")
    assert factory.call_args.kwargs["http_auth"] is signer.return_value


@pytest.fixture
def sent_requests(monkeypatch):
    """Replace the HTTP layer and record every request the transport sends."""
    sent = []
    outcome = {"raise": None}

    def perform_request(self, method, url, params=None, body=None, **kwargs):
        sent.append((method, url))
        raise outcome["raise"]

    monkeypatch.setattr(RequestsHttpConnection, "perform_request", perform_request)
    return sent, outcome


def local_provider() -> OpenSearchClient:
    return OpenSearchClient(make_config(open_search_endpoint="http://localhost:9200"))


def test_unavailable_bulk_page_is_sent_once(sent_requests):
    sent, outcome = sent_requests
    outcome["raise"] = os_exceptions.TransportError(
        503, "unavailable", {"error": "unavailable", "status": 503}
    )
    loader = BulkLoader(local_provider(), "people", CountingDocumentSource())

    with pytest.raises(ServerError) as excinfo:
        loader.load(5, 5)

    assert sent == [("POST", "/_bulk")]
    assert excinfo.value.status_code == 503
    assert excinfo.value.documents_loaded == 0


def test_connection_failure_is_sent_once(sent_requests):
    sent, outcome = sent_requests
    outcome["raise"] = os_exceptions.ConnectionError("N/A", "refused", OSError("refused"))
    loader = BulkLoader(local_provider(), "people", CountingDocumentSource())

    with pytest.raises(TransportError):
        loader.load(5, 5)

    assert sent == [("POST", "/_bulk")]
