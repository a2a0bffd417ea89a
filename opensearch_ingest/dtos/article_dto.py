from typing import List

from pydantic import BaseModel, ConfigDict, Field

from opensearch_ingest.dtos.tag_dto import TagDTO


class ArticleDTO(BaseModel):
    """A DTO for an article nested inside a document."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="ID")
    title: str = Field(alias="Title")
    body: str = Field(alias="Body")
    created_at: str = Field(alias="CreatedAt")

    tags: List[TagDTO] = Field(default_factory=list, alias="Tags")
