"""Query compiler: turns a raw keyword filter string into a CompiledFilter.

This module provides:
- CompiledFilter: immutable include/exclude/override-group term sets
- tokenize: explicit scan of a raw query into phrase, except-group and text tokens
- compile_query: build a CompiledFilter from a raw query
"""

from .compiler import compile_query, parse_override_group
from .models import CompiledFilter
from .tokenizer import Token, TokenKind, tokenize

__all__ = [
    "compile_query",
    "parse_override_group",
    "CompiledFilter",
    "Token",
    "TokenKind",
    "tokenize",
]
