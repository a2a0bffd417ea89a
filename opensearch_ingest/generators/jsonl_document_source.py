import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

from opensearch_ingest.errors import ConfigurationError, EncodingError
from opensearch_ingest.generators.abstract_classes import ABCDocumentSource


class JsonlDocumentSource(ABCDocumentSource):
    """Read documents from a JSON Lines file, one JSON object per line.

    The file is streamed, so arbitrarily large files can be loaded page by
    page. Use it as a context manager (or call ``close``) to release the file
    handle when a load stops early.
    """

    def __init__(self, jsonl_path: str | Path):
        self.jsonl_path = Path(jsonl_path)
        if not self.jsonl_path.exists():
            raise ConfigurationError(f"JSONL file not found: {self.jsonl_path}")
        self._documents = self._read_documents()

    def __enter__(self) -> "JsonlDocumentSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._documents.close()

    def count(self) -> int:
        """Return the number of documents in the file (blank lines excluded)."""
        with self.jsonl_path.open("r", encoding="utf-8") as f:
            return sum(1 for line in f if line.strip())

    def next_batch(self, count: int) -> List[Dict[str, Any]]:
        batch: List[Dict[str, Any]] = []
        if count <= 0:
            return batch
        for document in self._documents:
            batch.append(document)
            if len(batch) == count:
                break

        if len(batch) < count:
            raise ConfigurationError(
                f"{self.jsonl_path} ran out of documents: wanted {count}, got {len(batch)}"
            )
        return batch

    def _read_documents(self) -> Iterator[Dict[str, Any]]:
        """Yield one document per non-blank line.

        Malformed lines are not skipped: the load stops with the line number
        so the committed count stays meaningful.
        """
        with self.jsonl_path.open("r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    obj = json.loads(line)
                except json.JSONDecodeError as exc:
                    raise EncodingError(
                        f"{self.jsonl_path}:{line_number} is not valid JSON: {exc}"
                    ) from exc
                if not isinstance(obj, dict):
                    raise EncodingError(
                        f"{self.jsonl_path}:{line_number} is not a JSON object"
                    )
                yield obj
