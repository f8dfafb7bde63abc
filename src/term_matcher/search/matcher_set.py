"""Ordered collections of term matchers.

``MatcherSet`` is the boundary a search orchestrator calls for every
(item, term, token) triple. It validates arguments, filters empty terms and
runs the matchers in priority order. Ranking and merging of the returned
matches stay with the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import logging
from typing import Any

from term_matcher.config import Settings
from term_matcher.observability.metrics import record_match_attempt, track_latency
from term_matcher.search.matchers import ContainsMatch, EqualsMatch, StartsWithMatch, TermMatcher, sort_matchers
from term_matcher.search.models import InvalidMatchError, TermMatch
from term_matcher.search.tokens import Token, TokenizedItem


logger = logging.getLogger(__name__)


class MatcherSet:
    """Immutable, priority-ordered set of matchers keyed by ``TermMatcher.key``."""

    def __init__(
        self,
        matchers: Iterable[TermMatcher],
        *,
        skip_empty_terms: bool = True,
        record_metrics: bool = True,
    ) -> None:
        ordered = sort_matchers(matchers)
        seen: set[str] = set()
        for matcher in ordered:
            key = getattr(matcher, "key", None)
            if not isinstance(key, str) or not key:
                msg = f"Matcher {matcher!r} must define a non-empty key"
                raise ValueError(msg)
            if key in seen:
                msg = f"Duplicate matcher key '{key}'"
                raise ValueError(msg)
            seen.add(key)

        self._matchers: tuple[TermMatcher, ...] = tuple(ordered)
        self.skip_empty_terms = skip_empty_terms
        self.record_metrics = record_metrics

    def __iter__(self) -> Iterator[TermMatcher]:
        return iter(self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)

    def __contains__(self, key: object) -> bool:
        return any(matcher.key == key for matcher in self._matchers)

    def __repr__(self) -> str:
        return f"MatcherSet({list(self.keys())!r})"

    def keys(self) -> list[str]:
        return [matcher.key for matcher in self._matchers]

    def get(self, key: str) -> TermMatcher | None:
        for matcher in self._matchers:
            if matcher.key == key:
                return matcher
        return None

    def without(self, *keys: str) -> MatcherSet:
        """Return a copy that no longer runs the given matcher keys."""
        excluded = set(keys)
        return MatcherSet(
            (matcher for matcher in self._matchers if matcher.key not in excluded),
            skip_empty_terms=self.skip_empty_terms,
            record_metrics=self.record_metrics,
        )

    def apply(self, search: Any, item: TokenizedItem[Any], term: str, token: Token) -> list[TermMatch]:
        """Run every matcher against ``token`` and return all matches in priority order."""
        if not self._accepts(term, token):
            return []

        matches: list[TermMatch] = []
        with track_latency():
            for matcher in self._matchers:
                found = matcher.apply(search, item, term, token)
                self._record(matcher, found)
                matches.extend(found)
        return matches

    def first_match(self, search: Any, item: TokenizedItem[Any], term: str, token: Token) -> list[TermMatch]:
        """Return the matches of the most significant matcher that found any."""
        if not self._accepts(term, token):
            return []

        with track_latency():
            for matcher in self._matchers:
                found = matcher.apply(search, item, term, token)
                self._record(matcher, found)
                if found:
                    return found
        return []

    def _accepts(self, term: str, token: Token) -> bool:
        if term is None:
            raise InvalidMatchError("term must not be None")
        if token is None:
            raise InvalidMatchError("token must not be None")
        if self.skip_empty_terms and not term.strip():
            logger.debug("Skipping empty term", extra={"token": token})
            return False
        return True

    def _record(self, matcher: TermMatcher, found: list[TermMatch]) -> None:
        if self.record_metrics:
            record_match_attempt(matcher.key, len(found))


_MATCHER_FACTORIES: dict[str, Callable[[], TermMatcher]] = {
    EqualsMatch.key: EqualsMatch,
    StartsWithMatch.key: StartsWithMatch,
    ContainsMatch.key: ContainsMatch,
}


def register_matcher(key: str, factory: Callable[[], TermMatcher]) -> None:
    """Make a custom matcher available to ``get_matcher`` and configuration."""
    if not key:
        raise ValueError("Matcher key must not be empty")
    _MATCHER_FACTORIES[key] = factory


def get_matcher(key: str) -> TermMatcher:
    """Return a matcher instance by key."""
    if key not in _MATCHER_FACTORIES:
        msg = f"Unknown matcher '{key}'. Available: {sorted(_MATCHER_FACTORIES)}"
        raise ValueError(msg)
    return _MATCHER_FACTORIES[key]()


def default_matcher_set() -> MatcherSet:
    """Equals, startsWith and contains with default options."""
    return MatcherSet([EqualsMatch(), StartsWithMatch(), ContainsMatch()])


def build_matcher_set(settings: Settings | None = None) -> MatcherSet:
    """Build the matcher set described by ``settings`` (environment when omitted)."""
    if settings is None:
        settings = Settings()

    matcher_set = MatcherSet(
        [get_matcher(key) for key in settings.get_active_matcher_keys()],
        skip_empty_terms=settings.skip_empty_terms,
        record_metrics=settings.metrics_enabled,
    )
    logger.info("Matcher set built: %s", ", ".join(matcher_set.keys()), extra={"matchers": matcher_set.keys()})
    return matcher_set
