"""Term matchers.

A matcher examines a search term and a token and decides whether the token
satisfies the term. Each kind of match (equals, startsWith, contains) is its
own ``TermMatcher`` so callers can add or remove them freely, e.g. to run a
search without substring matches.

Matchers are ordered by ``priority``: lower values are more significant and
are considered first. Matchers hold no state, so a single instance can be
shared across threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar

from term_matcher.search.models import CONTAINS_KEY, EQUALS_KEY, STARTS_WITH_KEY, TermMatch
from term_matcher.search.tokens import Token, TokenizedItem


DEFAULT_MATCHER_PRIORITY = 1000


class TermMatcher(ABC):
    """Base class for all term matchers."""

    key: ClassVar[str]
    priority: ClassVar[int] = DEFAULT_MATCHER_PRIORITY

    @abstractmethod
    def apply(self, search: Any, item: TokenizedItem[Any], term: str, token: Token) -> list[TermMatch]:
        """Apply this matcher and return zero or more matches.

        Args:
            search: Opaque handle of the calling search; passed through untouched.
            item: The tokenized item that ``token`` belongs to.
            term: Search term or partial search term.
            token: Token to test against ``term``.

        Returns:
            An empty list when the token does not match.
        """

    def __lt__(self, other: TermMatcher) -> bool:
        if not isinstance(other, TermMatcher):
            return NotImplemented
        return self.priority < other.priority

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, priority={self.priority})"


def compare_matchers(left: TermMatcher, right: TermMatcher) -> int:
    """Three-way comparison of two matchers by priority."""

    return (left.priority > right.priority) - (left.priority < right.priority)


def sort_matchers(matchers: Iterable[TermMatcher]) -> list[TermMatcher]:
    """Return matchers ordered by priority; ties keep their input order."""

    return sorted(matchers, key=lambda matcher: matcher.priority)


class EqualsMatch(TermMatcher):
    key = EQUALS_KEY
    priority = DEFAULT_MATCHER_PRIORITY - 200

    def apply(self, search: Any, item: TokenizedItem[Any], term: str, token: Token) -> list[TermMatch]:
        term = term.lower()
        if token.equals(term):
            return [TermMatch.equals(term, token)]
        return []


class StartsWithMatch(TermMatcher):
    key = STARTS_WITH_KEY
    priority = DEFAULT_MATCHER_PRIORITY - 100

    def apply(self, search: Any, item: TokenizedItem[Any], term: str, token: Token) -> list[TermMatch]:
        # An empty term is a prefix of every token.
        term = term.lower()
        if token.starts_with(term):
            return [TermMatch.starts_with(term, token)]
        return []


class ContainsMatch(TermMatcher):
    """Substring match, skipped for single-character terms."""

    key = CONTAINS_KEY
    priority = DEFAULT_MATCHER_PRIORITY + 100

    def apply(self, search: Any, item: TokenizedItem[Any], term: str, token: Token) -> list[TermMatch]:
        # Length is taken before lower-casing; characters such as "İ" expand when lower-cased.
        if len(term) <= 1:
            return []
        term = term.lower()
        if token.contains(term):
            return [TermMatch.contains(term, token)]
        return []
