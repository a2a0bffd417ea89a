from .article_dto import ArticleDTO
from .document_dto import DocumentDTO
from .load_progress import IngestionReport, LoadProgress, LoadResult
from .query_spec import QuerySpec
from .tag_dto import TagDTO

__all__ = [
    "ArticleDTO",
    "DocumentDTO",
    "IngestionReport",
    "LoadProgress",
    "LoadResult",
    "QuerySpec",
    "TagDTO",
]
