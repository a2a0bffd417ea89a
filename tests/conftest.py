import pytest

from tests.fakes import CountingDocumentSource, FakeClient


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def document_source() -> CountingDocumentSource:
    return CountingDocumentSource()
