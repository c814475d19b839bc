"""Pydantic models for the JSON cloud document."""

from pydantic import BaseModel, Field

from .cloud import TagCloud
from .scaling import FONT_MAX, FONT_MIN


class TagEntry(BaseModel):
    """A single tag in the cloud."""

    word: str
    count: int = Field(ge=1)
    size: int = Field(ge=FONT_MIN, le=FONT_MAX)


class CloudDocument(BaseModel):
    """A complete tag cloud, tags in display order."""

    title: str
    source: str
    top_n: int = Field(ge=0)
    tags: list[TagEntry] = []

    @classmethod
    def from_cloud(cls, cloud: TagCloud) -> "CloudDocument":
        return cls(
            title=cloud.title,
            source=cloud.source,
            top_n=cloud.count,
            tags=[
                TagEntry(word=r.word, count=r.count, size=r.size_class) for r in cloud.records
            ],
        )
