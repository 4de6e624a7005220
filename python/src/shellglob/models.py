"""Data models for shellglob."""

from __future__ import annotations

from enum import Enum


class MatchResult(Enum):
    """Outcome of matching one pattern against one text.

    ``SYNTAX_ERROR`` is truthy like ``MATCHED``: a caller that only wants
    accept/reject treats a malformed pattern as "could not rule out a match".
    Negation (``~``) swaps the two clean outcomes and leaves
    ``SYNTAX_ERROR`` untouched.
    """

    UNMATCHED = "GLOB_UNMATCHED"
    MATCHED = "GLOB_MATCHED"
    SYNTAX_ERROR = "GLOB_SYNTAX_ERROR"

    @classmethod
    def from_bool(cls, flag: bool) -> MatchResult:
        return cls.MATCHED if flag else cls.UNMATCHED

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def is_error(self) -> bool:
        return self is MatchResult.SYNTAX_ERROR

    def __bool__(self) -> bool:
        return self is not MatchResult.UNMATCHED

    def __invert__(self) -> MatchResult:
        if self is MatchResult.MATCHED:
            return MatchResult.UNMATCHED
        if self is MatchResult.UNMATCHED:
            return MatchResult.MATCHED
        return self

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MatchResult):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MatchResult):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MatchResult):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MatchResult):
            return NotImplemented
        return self.rank >= other.rank


_RANKS = {
    MatchResult.UNMATCHED: 0,
    MatchResult.MATCHED: 1,
    MatchResult.SYNTAX_ERROR: 2,
}
