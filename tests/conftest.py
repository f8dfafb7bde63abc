"""Shared test fixtures and configuration."""

import os

import pytest

from term_matcher.search.tokens import Token, TokenizedItem


# Test environment that overrides every config value
TEST_ENV = {
    "TERM_MATCHER_ENABLED_MATCHERS": "equals,startsWith,contains",
    "TERM_MATCHER_EXCLUDED_MATCHERS": "",
    "TERM_MATCHER_SKIP_EMPTY_TERMS": "true",
    "TERM_MATCHER_LOG_LEVEL": "info",
    "TERM_MATCHER_LOG_JSON": "true",
    "TERM_MATCHER_METRICS_ENABLED": "true",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset matcher environment variables to test defaults before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def catalog_item():
    """A tokenized item whose only token is 'catalog'."""
    return TokenizedItem.from_text({"id": 1, "title": "Catalog"}, "catalog", field="title")


@pytest.fixture
def catalog_token(catalog_item):
    return catalog_item.tokens[0]


@pytest.fixture
def token_of():
    """Build a standalone token from text."""

    def _make(text: str) -> Token:
        return Token(text=text, end_char=len(text))

    return _make
