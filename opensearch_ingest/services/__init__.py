from .batch_encoder import BatchEncoder
from .bulk_loader import BulkLoader, count_pages, plan_pages
from .ingestion_orchestrator import IngestionOrchestrator, IngestionState
from .query_client import QueryClient

__all__ = [
    "BatchEncoder",
    "BulkLoader",
    "IngestionOrchestrator",
    "IngestionState",
    "QueryClient",
    "count_pages",
    "plan_pages",
]
