"""
National Parks API — Fuzzy Matcher
====================================

"Fuzzy" here means case-insensitive substring / token containment, not edit
distance. The predicate is deliberately asymmetric:

    fuzzy_match("yose", "Yosemite National Park")  → True
    fuzzy_match("Yosemite National Park", "yose")  → False

Tokens are separated by Unicode White_Space characters only. str.split()
would also break on the ASCII separators \\x1c-\\x1f, which are not
whitespace and stay inside a token here.
"""

import re
from typing import List

_WHITESPACE = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def _tokens(text: str) -> List[str]:
    return [token for token in _WHITESPACE.split(text) if token]


def fuzzy_match(query: str, target: str) -> bool:
    """
    Decide whether `target` matches `query`.

    1. Lower-case both strings.
    2. Whole-string containment: `query` is a substring of `target`.
    3. Token containment: some whitespace-delimited query token is a
       substring of some whitespace-delimited target token.

    An empty query matches every target.
    """
    query = query.lower()
    target = target.lower()

    if query in target:
        return True

    target_tokens = _tokens(target)
    for q_token in _tokens(query):
        for t_token in target_tokens:
            if q_token in t_token:
                return True

    return False
