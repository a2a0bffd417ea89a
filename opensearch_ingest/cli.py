"""Command line entry points for loading and querying an OpenSearch index.

Commands:
- insert-documents - bulk load fake or JSONL documents with refresh disabled
- search - run one Lucene query string search and print the response
- create-index / delete-index / list-indices - index lifecycle
- enable-refresh / disable-refresh - toggle the refresh interval by hand
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer

from opensearch_ingest.dtos.query_spec import QuerySpec
from opensearch_ingest.errors import IngestionError
from opensearch_ingest.generators import FakeDocumentSource, JsonlDocumentSource
from opensearch_ingest.global_config import global_config
from opensearch_ingest.logging_setup import configure_logging
from opensearch_ingest.opensearch import (
    IndexLifecycle,
    IndexSettingsController,
    OpenSearchClient,
)
from opensearch_ingest.services import BulkLoader, IngestionOrchestrator, QueryClient

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="opensearch-ingest",
    help="Bulk-load documents into OpenSearch and query them back",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    configure_logging(global_config.log_level, global_config.log_json)


def _client() -> OpenSearchClient:
    return OpenSearchClient(global_config)


def _print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _fail(exc: IngestionError) -> None:
    typer.echo(str(exc), err=True)
    raise typer.Exit(code=1)


@app.command("insert-documents")
def insert_documents(
    index: str = typer.Option(global_config.index_name, "--index", "-i"),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", help="Documents to load (default: config, or all JSONL lines)"
    ),
    page_size: int = typer.Option(global_config.page_size, "--page-size"),
    from_jsonl: Optional[Path] = typer.Option(
        None, "--from-jsonl", help="Load documents from a JSON Lines file instead of generating them"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for generated documents"),
) -> None:
    """Bulk load documents with refresh disabled for the duration of the load."""
    client = _client()
    try:
        if from_jsonl is not None:
            source = JsonlDocumentSource(from_jsonl)
            total = count if count is not None else source.count()
        else:
            source = FakeDocumentSource(seed=seed)
            total = count if count is not None else global_config.document_count

        orchestrator = IngestionOrchestrator(
            IndexSettingsController(client, refresh_interval=global_config.refresh_interval),
            BulkLoader(client, index, source),
            toggle_refresh=global_config.open_search_toggle_refresh,
        )
        try:
            report = orchestrator.run(total, page_size)
        finally:
            if isinstance(source, JsonlDocumentSource):
                source.close()
    except IngestionError as exc:
        _fail(exc)

    typer.echo(
        f"Insert completed: {report.load_result.submitted_count}/{report.load_result.total_count}"
    )


@app.command()
def search(
    index: str = typer.Option(global_config.index_name, "--index", "-i"),
    query: str = typer.Option("Age:[10 TO 20]", "--query", "-q", help="Lucene query string"),
    sort: List[str] = typer.Option(["Age:asc"], "--sort", help="<field>:<asc|desc>, repeatable"),
    size: int = typer.Option(3, "--size"),
    request_cache: bool = typer.Option(
        False, "--request-cache/--no-request-cache", help="Allow the shard request cache"
    ),
) -> None:
    """Run one search and print the response body."""
    try:
        spec = QuerySpec(query=query, sort=sort, size=size, bypass_cache=not request_cache)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        response = QueryClient(_client()).search(index, spec)
    except IngestionError as exc:
        _fail(exc)

    _print_json(response)


@app.command("create-index")
def create_index(index: str = typer.Option(global_config.index_name, "--index", "-i")) -> None:
    """Create an index with refresh disabled, one shard and no replicas."""
    try:
        _print_json(IndexLifecycle(_client()).create_index(index))
    except IngestionError as exc:
        _fail(exc)


@app.command("delete-index")
def delete_index(index: str = typer.Option(global_config.index_name, "--index", "-i")) -> None:
    try:
        _print_json(IndexLifecycle(_client()).delete_index(index))
    except IngestionError as exc:
        _fail(exc)


@app.command("list-indices")
def list_indices() -> None:
    try:
        _print_json(IndexLifecycle(_client()).list_indices())
    except IngestionError as exc:
        _fail(exc)


@app.command("enable-refresh")
def enable_refresh(index: str = typer.Option(global_config.index_name, "--index", "-i")) -> None:
    controller = IndexSettingsController(_client(), refresh_interval=global_config.refresh_interval)
    try:
        _print_json(controller.enable_refresh(index))
    except IngestionError as exc:
        _fail(exc)


@app.command("disable-refresh")
def disable_refresh(index: str = typer.Option(global_config.index_name, "--index", "-i")) -> None:
    controller = IndexSettingsController(_client(), refresh_interval=global_config.refresh_interval)
    try:
        _print_json(controller.disable_refresh(index))
    except IngestionError as exc:
        _fail(exc)


if __name__ == "__main__":
    app()
