"""Tokenizer for keyword filter queries.

The query grammar is informal: comma-separated terms, quoted phrases that may
carry a leading ``-``, and ``except(...)`` override groups. Scanning happens
left to right so that whichever construct starts first owns its characters:
a quote that opens before ``except(`` swallows it, and quoted elements inside
an ``except(...)`` belong to the group.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

PHRASE_PATTERN = re.compile(r"""(?P<negated>-?)(?:"(?P<double>[^"]+)"|'(?P<single>[^']+)')""")

# Quoted elements may contain ")" without closing the group. A quote with no
# partner later in the query is a plain character. The body alternatives are
# mutually exclusive.
EXCEPT_PATTERN = re.compile(
    r"""except\s*\((?P<body>(?:"[^"]*"|'[^']*'|"(?![^"]*")|'(?![^']*')|[^)"'])*)\)""",
    re.IGNORECASE,
)


class TokenKind(str, Enum):
    """Kinds of token produced by the tokenizer."""

    PHRASE = "phrase"
    EXCEPT_GROUP = "except_group"
    TEXT = "text"


@dataclass(frozen=True)
class Token:
    """A single lexical unit of a filter query.

    Attributes:
        kind: Token kind
        value: Phrase body without quotes, group body without ``except(``/``)``,
            or a run of plain text
        negated: True for a phrase written with a leading ``-``
        position: Offset of the token in the raw query
    """

    kind: TokenKind
    value: str
    negated: bool = False
    position: int = 0


def tokenize(raw: str) -> List[Token]:
    """Split a raw filter query into tokens.

    Never fails: characters that do not start a phrase or an except group,
    including unbalanced quotes and stray parentheses, are returned as text.

    Args:
        raw: Raw filter query

    Returns:
        Tokens in query order
    """
    tokens: List[Token] = []
    text_start = None
    pos = 0

    while pos < len(raw):
        match = EXCEPT_PATTERN.match(raw, pos)
        if match:
            kind = TokenKind.EXCEPT_GROUP
            value = match.group("body").strip()
            negated = False
        else:
            match = PHRASE_PATTERN.match(raw, pos)
            if match:
                kind = TokenKind.PHRASE
                value = match.group("double") or match.group("single")
                negated = bool(match.group("negated"))

        if not match:
            if text_start is None:
                text_start = pos
            pos += 1
            continue

        if text_start is not None:
            tokens.append(Token(TokenKind.TEXT, raw[text_start:pos], position=text_start))
            text_start = None

        tokens.append(Token(kind, value, negated=negated, position=pos))
        pos = match.end()

    if text_start is not None:
        tokens.append(Token(TokenKind.TEXT, raw[text_start:], position=text_start))

    return tokens
