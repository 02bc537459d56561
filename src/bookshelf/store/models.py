"""
Record types held by the book store
"""

from pydantic import BaseModel, ConfigDict, Field


class BookRecord(BaseModel):
    """A single book held in the store."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Identifier assigned by the store")
    title: str | None = Field(None, description="Book title")
    author: str | None = Field(None, description="Author name")
