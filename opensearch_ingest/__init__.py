"""Bulk-load documents into OpenSearch and query them back."""

__version__ = "0.1.0"
