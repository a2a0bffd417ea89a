from pydantic import BaseModel, ConfigDict, Field


class TagDTO(BaseModel):
    """A DTO for a single tag attached to a document or an article."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="Name")
