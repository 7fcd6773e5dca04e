"""Term normalization and text folding.

The compiler and the evaluator must fold case the same way, otherwise a
compiled term could fail to match text that looks identical. Everything that
lower-cases a term or a search text goes through ``fold_case``.
"""

from typing import Optional

QUOTE_CHARS = "\"'"


def fold_case(text: str) -> str:
    """Lower-case text using the locale-independent ``str.lower`` rule."""
    return text.lower()


def normalize_term(fragment: Optional[str]) -> Optional[str]:
    """Normalize a raw query fragment into a term.

    Lower-cases, trims surrounding whitespace and strips wrapping quote
    characters.

    Args:
        fragment: Raw fragment taken from a filter query

    Returns:
        The normalized term, or None if nothing is left
    """
    if not fragment:
        return None

    term = fold_case(fragment).strip().strip(QUOTE_CHARS).strip()
    return term or None


def build_search_text(title: Optional[str], summary: Optional[str]) -> str:
    """Build the folded text that terms are searched in.

    Args:
        title: Item title
        summary: Item summary or excerpt

    Returns:
        Lower-cased title and summary joined by a single space
    """
    return fold_case(f"{title or ''} {summary or ''}")


def contains_term(search_text: str, term: str) -> bool:
    """Plain substring test, no word boundaries."""
    return term in search_text
