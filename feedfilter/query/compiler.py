"""Compile raw keyword filter queries into CompiledFilter values.

Precedence is applied in three explicit passes over the token stream:
1. Quoted phrases become include or exclude terms
2. ``except(...)`` bodies become override groups
3. Remaining text is split on commas into bare include/exclude terms
"""

import re
from typing import List, Optional, Tuple

from feedfilter.utils.terms import fold_case, normalize_term

from .models import CompiledFilter
from .tokenizer import Token, TokenKind, tokenize

GROUP_ELEMENT_PATTERN = re.compile(r""""[^"]*"|'[^']*'|[^,]+""")

EXCLUDE_PREFIX = "-"


def compile_query(raw: Optional[str]) -> CompiledFilter:
    """Compile a raw filter query.

    Example query::

        flood,"traffic jam",-"canvey island",-chelmsford,except("museum","country park")

    Never raises. Malformed fragments degrade to bare comma-separated terms and
    empty fragments are dropped.

    Args:
        raw: Raw filter query, possibly empty or None

    Returns:
        CompiledFilter; an empty one for an empty or missing query
    """
    if not raw:
        return CompiledFilter()

    tokens = tokenize(raw)
    include: List[str] = []
    exclude: List[str] = []

    _collect_phrases(tokens, include, exclude)
    override_groups = _collect_override_groups(tokens)
    _collect_bare_terms(tokens, include, exclude)

    return CompiledFilter(
        include=tuple(include),
        exclude=tuple(exclude),
        override_groups=override_groups,
    )


def parse_override_group(body: str) -> Tuple[str, ...]:
    """Parse the body of an ``except(...)`` clause.

    Elements are comma-separated and may be double-quoted, single-quoted or
    bare. Commas inside quotes do not split.

    Args:
        body: Text between the parentheses

    Returns:
        Normalized terms in order, empty if none survive normalization
    """
    terms = []
    for element in GROUP_ELEMENT_PATTERN.findall(body):
        term = normalize_term(element)
        if term:
            terms.append(term)
    return tuple(terms)


def _collect_phrases(tokens: List[Token], include: List[str], exclude: List[str]) -> None:
    for token in tokens:
        if token.kind is not TokenKind.PHRASE:
            continue
        term = normalize_term(token.value)
        if not term:
            continue
        if token.negated:
            exclude.append(term)
        else:
            include.append(term)


def _collect_override_groups(tokens: List[Token]) -> Tuple[Tuple[str, ...], ...]:
    groups = []
    for token in tokens:
        if token.kind is not TokenKind.EXCEPT_GROUP:
            continue
        group = parse_override_group(token.value)
        if group:
            groups.append(group)
    return tuple(groups)


def _collect_bare_terms(tokens: List[Token], include: List[str], exclude: List[str]) -> None:
    # Phrases and groups are cut out of the query, so the text around them joins up
    remainder = "".join(token.value for token in tokens if token.kind is TokenKind.TEXT)

    for piece in fold_case(remainder).split(","):
        piece = piece.strip()
        if not piece:
            continue
        if piece.startswith(EXCLUDE_PREFIX):
            term = normalize_term(piece[len(EXCLUDE_PREFIX):])
            if term:
                exclude.append(term)
        else:
            term = normalize_term(piece)
            if term:
                include.append(term)
