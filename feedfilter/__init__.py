"""Keyword filter expression engine for scraped feed items."""

from .matching import KeywordFilter, MatchResult, evaluate, matches
from .query import CompiledFilter, compile_query
from .domain import FeedItem, MatchInput

__all__ = [
    "compile_query",
    "CompiledFilter",
    "matches",
    "evaluate",
    "KeywordFilter",
    "MatchResult",
    "MatchInput",
    "FeedItem",
]

__version__ = "1.0.0"
