"""Domain models for feed items handed to the keyword filter."""

from .models import FeedItem, MatchInput

__all__ = ["FeedItem", "MatchInput"]
