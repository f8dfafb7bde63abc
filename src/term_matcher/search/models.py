"""Match result value type."""

from __future__ import annotations

from dataclasses import dataclass

from term_matcher.search.tokens import Token


EQUALS_KEY = "equals"
STARTS_WITH_KEY = "startsWith"
CONTAINS_KEY = "contains"


class InvalidMatchError(ValueError):
    """Raised when a match is built or requested with missing arguments."""


@dataclass(frozen=True)
class TermMatch:
    """A positive match of a search term against a token.

    Build instances through the named constructors so the matcher key is
    fixed at creation time:

        >>> TermMatch.equals("abc", Token("abc")).key
        'equals'

    Attributes:
        key: Key of the matcher that produced this match, e.g. ``contains``.
        term: The search term, or partial search term, that was matched.
        matched_token: The token that matched.
    """

    key: str
    term: str
    matched_token: Token

    def __post_init__(self) -> None:
        if self.key is None or self.term is None or self.matched_token is None:
            msg = f"TermMatch fields must not be None: key={self.key!r}, term={self.term!r}"
            raise InvalidMatchError(msg)
        if not isinstance(self.key, str) or not self.key:
            msg = f"TermMatch key must be a non-empty string, got {self.key!r}"
            raise InvalidMatchError(msg)
        if not isinstance(self.term, str):
            msg = f"TermMatch term must be a string, got {type(self.term).__name__}"
            raise InvalidMatchError(msg)

    @classmethod
    def equals(cls, term: str, matched_token: Token) -> TermMatch:
        return cls(EQUALS_KEY, term, matched_token)

    @classmethod
    def contains(cls, term: str, matched_token: Token) -> TermMatch:
        return cls(CONTAINS_KEY, term, matched_token)

    @classmethod
    def starts_with(cls, term: str, matched_token: Token) -> TermMatch:
        return cls(STARTS_WITH_KEY, term, matched_token)

    @classmethod
    def of(cls, key: str, term: str, matched_token: Token) -> TermMatch:
        return cls(key, term, matched_token)

    def __str__(self) -> str:
        return f"TermMatch({self.key}) {{term: {self.term}, matched_token: {self.matched_token}}}"
