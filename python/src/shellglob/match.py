"""Shell-style glob matching over Unicode code points."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import MatchResult

logger = logging.getLogger(__name__)


def _match_class(pattern: str, p: int, ch: str) -> tuple[MatchResult, int]:
    """Match *ch* against the bracket expression starting at ``pattern[p]``.

    *p* points just past the opening ``[``.  Returns the outcome and the
    index just past the closing ``]``.  The first member is always taken
    literally, so ``[]...]`` and ``[-...]`` name ``]`` and ``-``.  A ``-``
    directly before ``]`` is a literal dash; any other ``-`` spans the
    previous member and the next one, inclusive.
    """
    end = len(pattern)
    if p >= end:
        return MatchResult.SYNTAX_ERROR, p

    negate = pattern[p] == "!"
    if negate:
        p += 1
        if p >= end:
            return MatchResult.SYNTAX_ERROR, p

    prev = pattern[p]
    found = prev == ch
    p += 1

    while p < end and pattern[p] != "]":
        member = pattern[p]
        if member == "-":
            p += 1
            if p >= end:
                return MatchResult.SYNTAX_ERROR, p
            upper = pattern[p]
            if upper == "]":
                # Leave p on the "]" so the loop stops there.
                found = found or ch == "-"
            else:
                found = found or prev <= ch <= upper
                prev = upper
                p += 1
        else:
            found = found or member == ch
            prev = member
            p += 1

    if p >= end:
        return MatchResult.SYNTAX_ERROR, p

    result = MatchResult.from_bool(found)
    if negate:
        result = ~result
    return result, p + 1


def _scan(pattern: str, text: str, p: int, t: int, stars: list[tuple[int, int]]) -> MatchResult:
    """Walk pattern and text from ``(p, t)`` until one of them runs out.

    Each ``*`` is recorded on *stars* as ``(star index, text index)`` with
    zero characters consumed, and the scan carries on past it.
    """
    while p < len(pattern) and t < len(text):
        token = pattern[p]
        if token == "?":
            p += 1
            t += 1
        elif token == "*":
            # "**" matches exactly what "*" does.
            while p + 1 < len(pattern) and pattern[p + 1] == "*":
                p += 1
            stars.append((p, t))
            p += 1
        elif token == "[":
            result, p = _match_class(pattern, p + 1, text[t])
            if result is not MatchResult.MATCHED:
                return result
            t += 1
        else:
            if token == "\\":
                p += 1
                if p >= len(pattern):
                    return MatchResult.SYNTAX_ERROR
            if pattern[p] != text[t]:
                return MatchResult.UNMATCHED
            p += 1
            t += 1
    return _tail(pattern, text, p, t)


def _tail(pattern: str, text: str, p: int, t: int) -> MatchResult:
    if t >= len(text):
        while p < len(pattern) and pattern[p] == "*":
            p += 1
        return MatchResult.from_bool(p >= len(pattern))
    return MatchResult.UNMATCHED


def _match_from(pattern: str, text: str) -> MatchResult:
    # Pending "*" choices as (star index, text index), innermost last.
    stars: list[tuple[int, int]] = []
    result = _scan(pattern, text, 0, 0, stars)
    # A syntax error further on is fatal, not a reason to backtrack.
    while not result and stars:
        star, t = stars.pop()
        t += 1
        if t < len(text):
            stars.append((star, t))
            result = _scan(pattern, text, star + 1, t, stars)
        else:
            result = _tail(pattern, text, star, t)
    return result


def glob(pattern: str, text: str) -> MatchResult:
    """Match the whole of *text* against a glob *pattern*.

    Supports:
    - ``?`` matches exactly one code point
    - ``*`` matches any run of code points, including none
    - ``[abc]``, ``[a-z]`` and negated ``[!a-z]`` character classes
    - ``\\`` makes the next pattern character literal (outside classes)

    The match is anchored at both ends.  A malformed pattern (unterminated
    class, dangling ``-`` or trailing ``\\``) yields
    :attr:`MatchResult.SYNTAX_ERROR` instead of raising, and wins over any
    partial match found before the scan reached it.
    """
    result = _match_from(pattern, text)
    if result.is_error:
        logger.debug("[glob.syntax_error] pattern=%r", pattern)
    return result


def glob_match(pattern: str, value: str) -> bool:
    """Return True if *pattern* matches *value* or is malformed.

    Use :func:`glob` when a malformed pattern must be told apart from a
    clean non-match.
    """
    return bool(glob(pattern, value))


def match_any(patterns: Iterable[str], value: str) -> MatchResult:
    """Return the first non-``UNMATCHED`` result over *patterns*, in order."""
    for pattern in patterns:
        result = glob(pattern, value)
        if result:
            return result
    return MatchResult.UNMATCHED
