"""Helpers shared by the query compiler and the match evaluator."""

from .terms import build_search_text, contains_term, fold_case, normalize_term

__all__ = [
    "fold_case",
    "normalize_term",
    "build_search_text",
    "contains_term",
]
