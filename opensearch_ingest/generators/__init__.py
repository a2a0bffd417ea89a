from .abstract_classes import ABCDocumentSource, Document
from .fake_document_source import FakeDocumentSource
from .jsonl_document_source import JsonlDocumentSource

__all__ = [
    "ABCDocumentSource",
    "Document",
    "FakeDocumentSource",
    "JsonlDocumentSource",
]
