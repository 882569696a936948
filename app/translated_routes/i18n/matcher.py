"""Wildcard matching for route keys.

A ``*`` in a route key matches one or more characters of the requested key,
including ``/``. Everything else in the key is matched literally. When a
pattern matches, the captured segments are substituted, left to right, into
the ``*`` occurrences of the localized pattern.

Both behaviours are kept for compatibility with existing route files: the
first matching pattern in RouteMap order wins (no "most specific" ranking),
and a wildcard may span several path segments.
"""

import re
from functools import lru_cache
from typing import Optional, Sequence, Tuple

from translated_routes.i18n.models import RouteMap

WILDCARD = "*"


@lru_cache(maxsize=1024)
def compile_wildcard(pattern: str) -> "re.Pattern[str]":
    """Compile a wildcard route key into an anchored regular expression.

    Literal text is escaped, so keys containing regex metacharacters
    (``.``, ``(``, ``[`` ...) can never produce an invalid expression.

    Args:
        pattern: Route key containing one or more ``*``.

    Returns:
        Compiled pattern with one capturing group per ``*``.
    """
    literals = pattern.split(WILDCARD)
    return re.compile("(.+?)".join(re.escape(literal) for literal in literals))


def match_wildcard(pattern: str, key: str) -> Optional[Tuple[str, ...]]:
    """Match ``key`` against a wildcard pattern.

    Returns:
        The captured segments, or None if the key does not match.
    """
    match = compile_wildcard(pattern).fullmatch(key)
    if match is None:
        return None
    return match.groups()


def substitute_wildcards(translation: str, segments: Sequence[str]) -> str:
    """Fill the ``*`` occurrences of ``translation`` with captured segments.

    One segment is consumed per ``*`` in order of appearance. Extra segments
    are dropped; ``*`` without a matching segment stay in place.
    """
    if WILDCARD not in translation or not segments:
        return translation

    parts = translation.split(WILDCARD)
    result = [parts[0]]
    for index, part in enumerate(parts[1:]):
        if index < len(segments):
            result.append(segments[index])
        else:
            result.append(WILDCARD)
        result.append(part)
    return "".join(result)


def resolve_wildcard(routes: RouteMap, key: str) -> Optional[str]:
    """Translate ``key`` through the first matching wildcard entry.

    Args:
        routes: RouteMap to scan, in insertion order.
        key: Requested route key.

    Returns:
        The substituted translation, or None if no wildcard entry matches.
    """
    for pattern, translation in routes.items():
        if WILDCARD not in pattern:
            continue
        segments = match_wildcard(pattern, key)
        if segments is not None:
            return substitute_wildcards(translation, segments)
    return None
