from .abstract_classes import ABCClient
from .index_lifecycle import IndexLifecycle
from .index_settings import IndexSettingsController
from .open_search_client import OpenSearchClient

__all__ = [
    "ABCClient",
    "IndexLifecycle",
    "IndexSettingsController",
    "OpenSearchClient",
]
