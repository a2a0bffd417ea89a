from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Union

from opensearch_ingest.dtos.document_dto import DocumentDTO

Document = Union[DocumentDTO, Mapping[str, Any]]


class ABCDocumentSource(ABC):
    """Abstract supplier of documents for a bulk load."""

    @abstractmethod
    def next_batch(self, count: int) -> List[Document]:
        """
        Return the next ``count`` documents.

        args:
            count (int): Number of documents wanted for the next page.

        returns:
            list: Exactly ``count`` documents, in submission order.
        """
        pass
