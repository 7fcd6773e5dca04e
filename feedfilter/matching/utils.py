"""Helpers for presenting match results to downstream consumers."""

from typing import Dict

from .models import MatchResult


def build_rationale_dict(match_result: MatchResult) -> Dict:
    """Build a lightweight rationale dict for a match result.

    Useful for structured logs and for the CLI ``--explain`` output.

    Args:
        match_result: MatchResult to serialize

    Returns:
        Dict with keys:
        - is_match: Whether the item is kept
        - decision: MatchDecision value
        - excluded_terms: Exclude terms found in the item
        - override_group: Index of the override group that applied, or None
        - included_terms: Include terms found in the item
        - reason: Human-readable explanation
    """
    return {
        "is_match": match_result.is_match,
        "decision": match_result.decision.value,
        "excluded_terms": list(match_result.matched_exclude_terms),
        "override_group": match_result.override_group_index,
        "included_terms": list(match_result.matched_include_terms),
        "reason": match_result.reason,
    }
