from .abc_document_source import ABCDocumentSource, Document

__all__ = [
    "ABCDocumentSource",
    "Document",
]
