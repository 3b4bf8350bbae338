"""Quota Classification: decides whether a provider failure means "out of quota".

Invariants:
    - Matching is a case-insensitive regex search over the error message text
    - None / empty messages are never quota errors
    - Only this module knows the phrases; services ask QuotaClassifier

Design Decisions:
    - Heuristic on message text: Gemini's REST errors expose no stable quota code
      in the fields we read. Patterns are configuration (QUOTA_ERROR_PATTERNS),
      the default list is not guaranteed complete
"""

import re
from collections.abc import Iterable

QUOTA_PATTERNS: tuple[str, ...] = ("quota", r"rate\s*limit", "billing")


def compile_quota_patterns(patterns: Iterable[str]) -> re.Pattern[str]:
    """Join patterns into one case-insensitive alternation."""
    return re.compile("|".join(f"(?:{p})" for p in patterns), re.IGNORECASE)


_DEFAULT_REGEX = compile_quota_patterns(QUOTA_PATTERNS)


def is_quota_error(message: str | None, regex: re.Pattern[str] = _DEFAULT_REGEX) -> bool:
    """True when the message looks like rate/usage-limit exhaustion."""
    if not message:
        return False
    return regex.search(str(message)) is not None


class QuotaClassifier:
    """Classifies exceptions with a configured pattern list."""

    def __init__(self, patterns: Iterable[str] = QUOTA_PATTERNS):
        self.patterns = tuple(patterns)
        self._regex = compile_quota_patterns(self.patterns) if self.patterns else None

    def matches(self, message: str | None) -> bool:
        if self._regex is None:
            return False
        return is_quota_error(message, self._regex)

    def is_quota_failure(self, exc: BaseException) -> bool:
        """Classify an exception by its message (DashboardError.message or str)."""
        return self.matches(getattr(exc, "message", None) or str(exc))
