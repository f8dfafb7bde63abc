"""Centralized configuration for term-matcher using Pydantic Settings."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_keys(raw: str) -> list[str]:
    return [key.strip() for key in raw.split(",") if key.strip()]


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``TERM_MATCHER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TERM_MATCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Matcher selection
    enabled_matchers: str = Field(
        default="equals,startsWith,contains",
        description="Comma-separated keys of the matchers to run",
    )
    excluded_matchers: str = Field(
        default="",
        description="Comma-separated matcher keys to drop from the enabled set (e.g. 'contains')",
    )
    skip_empty_terms: bool = Field(
        default=True,
        description="Return no matches for empty or blank terms instead of letting prefix matches fire",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    # Metrics
    metrics_enabled: bool = Field(default=True, description="Record Prometheus match counters")

    @model_validator(mode="after")
    def _check_active_matchers(self) -> "Settings":
        if not self.get_active_matcher_keys():
            raise ValueError(
                "No matchers left to run. Set TERM_MATCHER_ENABLED_MATCHERS to at least one matcher key "
                "that is not also listed in TERM_MATCHER_EXCLUDED_MATCHERS."
            )
        return self

    def get_enabled_matcher_keys(self) -> list[str]:
        """Get enabled matcher keys in the order they were configured."""
        return _split_keys(self.enabled_matchers)

    def get_excluded_matcher_keys(self) -> list[str]:
        """Get matcher keys that must not run."""
        return _split_keys(self.excluded_matchers)

    def get_active_matcher_keys(self) -> list[str]:
        """Get enabled matcher keys minus the excluded ones.

        Returns:
            Matcher keys in configured order, duplicates removed
        """
        excluded = set(self.get_excluded_matcher_keys())
        active: list[str] = []
        for key in self.get_enabled_matcher_keys():
            if key not in excluded and key not in active:
                active.append(key)
        return active
