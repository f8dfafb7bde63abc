"""Term-matching stage of a full-text search engine."""

from term_matcher.search.matcher_set import (
    MatcherSet,
    build_matcher_set,
    default_matcher_set,
    get_matcher,
    register_matcher,
)
from term_matcher.search.matchers import (
    DEFAULT_MATCHER_PRIORITY,
    ContainsMatch,
    EqualsMatch,
    StartsWithMatch,
    TermMatcher,
    compare_matchers,
    sort_matchers,
)
from term_matcher.search.models import InvalidMatchError, TermMatch
from term_matcher.search.tokens import RegexTokenizer, Token, TokenizedItem


__all__ = [
    "DEFAULT_MATCHER_PRIORITY",
    "ContainsMatch",
    "EqualsMatch",
    "InvalidMatchError",
    "MatcherSet",
    "RegexTokenizer",
    "StartsWithMatch",
    "TermMatch",
    "TermMatcher",
    "Token",
    "TokenizedItem",
    "build_matcher_set",
    "compare_matchers",
    "default_matcher_set",
    "get_matcher",
    "register_matcher",
    "sort_matchers",
]
