import json
from typing import Any, Iterable, Mapping

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from opensearch_ingest.errors import EncodingError
from opensearch_ingest.generators.abstract_classes import Document

COMPACT_SEPARATORS = (",", ":")


class BatchEncoder:
    """Encode documents into the newline-delimited ``_bulk`` request body.

    Every document is written on its own line right after a ``create``
    action header for the target index, and the payload ends with exactly one
    trailing newline, which the bulk endpoint requires.

    Example:
        >>> BatchEncoder("people").encode([{"Age": 7}])
        '{"create":{"_index":"people"}}\\n{"Age":7}\\n'
    """

    def __init__(self, index_name: str):
        """
        Args:
            index_name (str): Index every ``create`` action points at.
        """
        self.index_name = index_name
        self.action_line = json.dumps(
            {"create": {"_index": index_name}}, separators=COMPACT_SEPARATORS
        )

    def encode(self, documents: Iterable[Document]) -> str:
        """Build the bulk payload for a batch of documents.

        Args:
            documents (Iterable[Document]): DTOs or JSON-object mappings, in
                submission order.

        Returns:
            str: The payload; an empty string when there are no documents.

        Raises:
            EncodingError: A document cannot be serialized as JSON.
        """
        lines = []
        for document in documents:
            lines.append(self.action_line)
            lines.append(self.encode_document(document))

        if not lines:
            return ""

        # the bulk endpoint requires a terminating newline
        lines.append("")
        return "\n".join(lines)

    def encode_document(self, document: Document) -> str:
        """Serialize one document as a single compact JSON line."""
        try:
            return json.dumps(
                self._to_source(document),
                separators=COMPACT_SEPARATORS,
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"cannot encode document: {exc}") from exc

    def _to_source(self, document: Document) -> Any:
        if isinstance(document, BaseModel):
            try:
                return document.model_dump(mode="json", by_alias=True)
            except PydanticSerializationError as exc:
                raise EncodingError(f"cannot encode document: {exc}") from exc
        if isinstance(document, Mapping):
            return dict(document)
        raise EncodingError(
            f"documents must be DTOs or mappings, got {type(document).__name__}"
        )
