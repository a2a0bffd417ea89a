from typing import List

from pydantic import BaseModel, ConfigDict, Field

from opensearch_ingest.dtos.article_dto import ArticleDTO
from opensearch_ingest.dtos.tag_dto import TagDTO


class DocumentDTO(BaseModel):
    """A DTO for documents to be bulk loaded into OpenSearch.

    Field aliases are the keys written on the wire, so queries such as
    ``Age:[10 TO 20]`` address the capitalized names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    email: str = Field(alias="Email")
    password: str = Field(alias="Password")
    name: str = Field(alias="Name")
    age: int = Field(alias="Age")
    height: int = Field(alias="Height")
    phone_number: str = Field(alias="PhoneNumber")
    latitude: float = Field(alias="Latitude")
    longitude: float = Field(alias="Longitude")

    tags: List[TagDTO] = Field(default_factory=list, alias="Tags")
    articles: List[ArticleDTO] = Field(default_factory=list, alias="Article")
