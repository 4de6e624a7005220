"""shellglob: shell-style glob matching with a three-valued result."""

from __future__ import annotations

__version__ = "0.1.0"

from .match import glob, glob_match, match_any
from .models import MatchResult

__all__ = [
    "MatchResult",
    "glob",
    "glob_match",
    "match_any",
]
