"""Additional validation utilities for configuration."""

import re
import warnings
from typing import Any, Dict, List, Optional

from feedfilter.query.compiler import compile_query

UNCLOSED_EXCEPT_PATTERN = re.compile(r"except\s*\([^)]*$", re.IGNORECASE)

LARGE_WORKER_COUNT = 16


def check_keywords(keywords: Optional[str]) -> List[str]:
    """
    Check a filter query for fragments that will not parse as intended.

    The compiler accepts any string, so these are warnings, not errors.

    Args:
        keywords: Raw filter query

    Returns:
        List of warning messages
    """
    if keywords is None:
        return []

    warning_messages = []

    if keywords.count('"') % 2:
        warning_messages.append(
            "Unbalanced double quote in filter keywords; the unmatched quote "
            "will be treated as part of a plain term"
        )

    if UNCLOSED_EXCEPT_PATTERN.search(keywords):
        warning_messages.append(
            "except( without a closing parenthesis in filter keywords; "
            "it will be read as plain terms"
        )

    if keywords.strip() and compile_query(keywords).is_empty:
        warning_messages.append(
            f"Filter keywords {keywords!r} contain no usable terms; every item will be kept"
        )

    return warning_messages


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    filter_section = config_dict.get("filter", {})
    if isinstance(filter_section, dict):
        keywords = filter_section.get("keywords")
        if isinstance(keywords, str):
            warning_messages.extend(check_keywords(keywords))

    pipeline = config_dict.get("pipeline", {})
    if isinstance(pipeline, dict):
        max_workers = pipeline.get("max_workers", 1)
        if isinstance(max_workers, int) and max_workers > LARGE_WORKER_COUNT:
            warning_messages.append(
                f"Large max_workers ({max_workers}) is unlikely to speed up filtering"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages using Python's warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
