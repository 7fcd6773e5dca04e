"""Match evaluator for compiled keyword filters.

This module provides:
- evaluate / matches: pure evaluation of a CompiledFilter against item text
- MatchResult / MatchDecision: outcome of one evaluation and why
- KeywordFilter: a compiled filter bundled with logging for pipeline use
- build_rationale_dict: plain-dict view of a MatchResult
"""

from .engine import KeywordFilter, evaluate, matches
from .models import MatchDecision, MatchResult
from .utils import build_rationale_dict

__all__ = [
    "evaluate",
    "matches",
    "KeywordFilter",
    "MatchDecision",
    "MatchResult",
    "build_rationale_dict",
]
