"""Core domain models for candidate feed items.

This module defines:
- MatchInput: the (title, summary) pair the match evaluator reads
- FeedItem: a candidate item as delivered by an upstream collector
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field, field_validator


@dataclass(frozen=True)
class MatchInput:
    """Text of one candidate item, as extracted upstream.

    Attributes:
        title: Item title
        summary: Summary or excerpt text, empty if the item has none
    """

    title: str
    summary: str = ""


class FeedItem(BaseModel):
    """Candidate item produced by a scraper or feed reader.

    Only ``title`` and ``summary`` take part in filtering; the remaining
    fields are carried through so kept items can be emitted as-is.
    """

    title: str = Field(..., description="Item title")
    summary: str = Field("", description="Summary or excerpt text")
    url: Optional[str] = Field(None, description="Link to the item")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Strip whitespace from the title."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped

    @field_validator("summary", mode="before")
    @classmethod
    def coerce_summary(cls, v: Optional[str]) -> str:
        """Treat a missing summary as empty text."""
        if v is None:
            return ""
        return v

    def to_match_input(self) -> MatchInput:
        """Build the evaluator input for this item."""
        return MatchInput(title=self.title, summary=self.summary)
