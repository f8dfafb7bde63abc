"""Token types consumed by the matchers.

Tokenization itself belongs to the indexing layer. The types here are the
minimal surface the matchers rely on: a token that can answer
case-insensitive prefix, substring and equality questions, and an item
wrapper that carries the tokens extracted from it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import re
from typing import Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class Token:
    """A searchable unit extracted from an indexed item."""

    text: str
    position: int = 0
    start_char: int = 0
    end_char: int = 0
    field: str = ""

    def starts_with(self, term: str) -> bool:
        return self.text.lower().startswith(term.lower())

    def contains(self, term: str) -> bool:
        return term.lower() in self.text.lower()

    def equals(self, term: str) -> bool:
        return self.text.lower() == term.lower()

    def __str__(self) -> str:
        return self.text


class RegexTokenizer:
    """Regex-based tokenizer that yields word tokens."""

    def __init__(self, pattern: str = r"[\w']+", flags: int = re.UNICODE | re.MULTILINE) -> None:
        self.pattern = re.compile(pattern, flags)

    def __call__(self, text: str, field: str = "") -> Iterator[Token]:
        for position, match in enumerate(self.pattern.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                start_char=match.start(),
                end_char=match.end(),
                field=field,
            )


@dataclass(frozen=True)
class TokenizedItem(Generic[T]):
    """An indexed item together with the tokens extracted from it."""

    item: T
    tokens: tuple[Token, ...] = ()

    @classmethod
    def from_text(
        cls,
        item: T,
        text: str,
        field: str = "",
        tokenizer: RegexTokenizer | None = None,
    ) -> TokenizedItem[T]:
        tokenize = tokenizer or RegexTokenizer()
        return cls(item=item, tokens=tuple(tokenize(text, field)))

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)
