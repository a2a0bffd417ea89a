import logging
from typing import Any, Callable, Iterator, Mapping, Optional

from opensearch_ingest.dtos.load_progress import LoadProgress, LoadResult
from opensearch_ingest.errors import BulkItemError, ConfigurationError, IngestionError
from opensearch_ingest.generators.abstract_classes import ABCDocumentSource
from opensearch_ingest.opensearch.abstract_classes import ABCClient
from opensearch_ingest.opensearch.transport_errors import raw_body, translate_errors
from opensearch_ingest.services.batch_encoder import BatchEncoder

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[LoadProgress], None]


def validate_load_arguments(total_count: int, page_size: int) -> None:
    """Reject counts and page sizes a load cannot be planned from.

    Raises:
        ConfigurationError: ``page_size`` is not a positive integer or
            ``total_count`` is negative.
    """
    for name, value in (("total_count", total_count), ("page_size", page_size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if page_size <= 0:
        raise ConfigurationError(f"page_size must be positive, got {page_size}")
    if total_count < 0:
        raise ConfigurationError(f"total_count must not be negative, got {total_count}")


def count_pages(total_count: int, page_size: int) -> int:
    """Return how many pages ``plan_pages`` yields for these arguments."""
    validate_load_arguments(total_count, page_size)
    return -(-total_count // page_size)


def plan_pages(total_count: int, page_size: int) -> Iterator[int]:
    """Split ``total_count`` into page sizes, lazily.

    Full pages come first, followed by one shorter page for the remainder
    when ``total_count`` is not a multiple of ``page_size``. Arguments are
    checked on the call, not on the first ``next()``.

    Example:
        >>> list(plan_pages(750, 500))
        [500, 250]
    """
    validate_load_arguments(total_count, page_size)
    return _iter_pages(total_count, page_size)


def _iter_pages(total_count: int, page_size: int) -> Iterator[int]:
    full_pages, remainder = divmod(total_count, page_size)
    for _ in range(full_pages):
        yield page_size
    if remainder > 0:
        yield remainder


def log_progress(progress: LoadProgress) -> None:
    logger.info("Inserted: %d/%d", progress.documents_loaded, progress.total_count)


class BulkLoader:
    """Load documents into an index page by page through the ``_bulk`` endpoint.

    Pages are submitted one at a time. The first failing page aborts the load,
    and the raised error records the page number and how many documents the
    earlier pages committed, so a caller always knows the exact prefix that
    made it into the index.
    """

    def __init__(
        self,
        client: ABCClient,
        index_name: str,
        document_source: ABCDocumentSource,
        encoder: Optional[BatchEncoder] = None,
        on_progress: Optional[ProgressCallback] = None,
        fail_on_item_errors: bool = True,
    ):
        """
        Args:
            client (ABCClient): Provider of the OpenSearch client.
            index_name (str): Index the documents are created in.
            document_source (ABCDocumentSource): Supplies the documents of
                each page.
            encoder (BatchEncoder, optional): Payload encoder; defaults to
                one bound to ``index_name``.
            on_progress (callable, optional): Called after every submitted
                page; defaults to logging ``Inserted: n/total``.
            fail_on_item_errors (bool): Abort when a successful bulk response
                still rejects some items. When False the rejections are only
                logged.
        """
        self._client = client
        self.index_name = index_name
        self.document_source = document_source
        self.encoder = encoder or BatchEncoder(index_name)
        self.on_progress = on_progress or log_progress
        self.fail_on_item_errors = fail_on_item_errors

    def load(self, total_count: int, page_size: int) -> LoadResult:
        """Create ``total_count`` documents in pages of ``page_size``.

        Args:
            total_count (int): Number of documents to load; 0 loads nothing.
            page_size (int): Documents per bulk request.

        Returns:
            LoadResult: Number of documents and pages submitted.

        Raises:
            ConfigurationError: Invalid arguments, raised before any request.
            IngestionError: A page failed; ``page_number`` and
                ``documents_loaded`` are set on the error.
        """
        total_pages = count_pages(total_count, page_size)
        pages = plan_pages(total_count, page_size)
        documents_loaded = 0

        logger.info(
            "Inserting %d documents into %s in %d page(s)",
            total_count,
            self.index_name,
            total_pages,
        )

        for page_number, size in enumerate(pages, start=1):
            try:
                self.submit_page(size)
            except IngestionError as exc:
                exc.with_progress(page_number=page_number, documents_loaded=documents_loaded)
                logger.error(
                    "Bulk page %d/%d failed after %d documents: %s",
                    page_number,
                    total_pages,
                    documents_loaded,
                    exc.message,
                )
                raise

            documents_loaded += size
            self.on_progress(
                LoadProgress(
                    documents_loaded=documents_loaded,
                    total_count=total_count,
                    page_number=page_number,
                    total_pages=total_pages,
                )
            )

        logger.info("Insert completed")
        return LoadResult(
            submitted_count=documents_loaded,
            total_count=total_count,
            pages_submitted=total_pages,
        )

    def submit_page(self, size: int) -> Any:
        """Fetch, encode and submit one page; return the bulk response."""
        documents = self.document_source.next_batch(size)
        if len(documents) != size:
            raise ConfigurationError(
                f"document source returned {len(documents)} documents, expected {size}"
            )

        payload = self.encoder.encode(documents)

        os_client = self._client.get_client()
        with translate_errors("bulk"):
            response = os_client.bulk(body=payload)

        self._check_item_errors(response)
        return response

    def _check_item_errors(self, response: Any) -> None:
        if not isinstance(response, Mapping) or not response.get("errors"):
            return

        failed_items = [
            result
            for item in response.get("items", [])
            for result in item.values()
            if isinstance(result, Mapping) and result.get("error")
        ]
        if self.fail_on_item_errors:
            raise BulkItemError(body=raw_body(response), failed_items=failed_items)

        logger.warning(
            "Bulk page rejected %d item(s), sample: %s",
            len(failed_items),
            failed_items[:3],
        )
