from abc import ABC, abstractmethod

from opensearchpy import OpenSearch


class ABCClient(ABC):
    """Provider of the OpenSearch client shared by the loading and query components.

    Components receive a provider in their constructor and ask it for the
    client when they issue a request, so tests can hand in a fake.
    """

    @abstractmethod
    def get_client(self) -> OpenSearch:
        """Return the OpenSearch client to send requests with."""
        raise NotImplementedError
