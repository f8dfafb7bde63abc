"""Unit tests for term-matcher settings."""

from pydantic import ValidationError
import pytest

from term_matcher.config import Settings


@pytest.mark.unit
def test_defaults_enable_all_builtin_matchers():
    settings = Settings()
    assert settings.get_enabled_matcher_keys() == ["equals", "startsWith", "contains"]
    assert settings.get_excluded_matcher_keys() == []
    assert settings.skip_empty_terms is True
    assert settings.metrics_enabled is True


@pytest.mark.unit
def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TERM_MATCHER_ENABLED_MATCHERS", "startsWith")
    monkeypatch.setenv("TERM_MATCHER_SKIP_EMPTY_TERMS", "false")
    monkeypatch.setenv("TERM_MATCHER_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.get_active_matcher_keys() == ["startsWith"]
    assert settings.skip_empty_terms is False
    assert settings.log_level == "debug"


@pytest.mark.unit
def test_key_lists_are_trimmed_and_blank_entries_dropped():
    settings = Settings(enabled_matchers=" equals , ,contains ", excluded_matchers=" , ")
    assert settings.get_enabled_matcher_keys() == ["equals", "contains"]
    assert settings.get_excluded_matcher_keys() == []


@pytest.mark.unit
def test_active_keys_remove_exclusions_and_duplicates():
    settings = Settings(enabled_matchers="contains,equals,contains,startsWith", excluded_matchers="startsWith")
    assert settings.get_active_matcher_keys() == ["contains", "equals"]


@pytest.mark.unit
def test_rejects_configuration_without_active_matchers():
    with pytest.raises(ValidationError, match="No matchers left to run"):
        Settings(enabled_matchers="contains", excluded_matchers="contains")


@pytest.mark.unit
def test_rejects_empty_enabled_list(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TERM_MATCHER_ENABLED_MATCHERS", "")
    with pytest.raises(ValidationError, match="TERM_MATCHER_ENABLED_MATCHERS"):
        Settings()
