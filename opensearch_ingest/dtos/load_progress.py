from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class LoadProgress(BaseModel):
    """Progress signal emitted after every successfully submitted page."""

    model_config = ConfigDict(frozen=True)

    documents_loaded: int
    total_count: int
    page_number: int
    total_pages: int


class LoadResult(BaseModel):
    """Outcome of a completed bulk load."""

    model_config = ConfigDict(frozen=True)

    submitted_count: int
    total_count: int
    pages_submitted: int


class IngestionReport(BaseModel):
    """Outcome of an orchestrated load, including the settings acknowledgments."""

    index_name: str
    load_result: LoadResult
    disable_acknowledgment: Optional[Any] = None
    enable_acknowledgment: Optional[Any] = None
