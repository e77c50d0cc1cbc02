"""Configuration models for Focus Session CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from focus_session_cli.models.focus.validation import DEFAULT_MINUTES, MAX_MINUTES


class FocusConfig(BaseModel):
    """Focus session settings."""

    default_minutes: float = Field(
        default=DEFAULT_MINUTES, description="Session length offered by the start prompt"
    )
    max_minutes: float = Field(default=MAX_MINUTES, description="Longest accepted session")
    tick_interval_ms: int = Field(
        default=1000, description="Interval between timer refreshes"
    )
    confirm_stop: bool = Field(
        default=True, description="Ask before stopping a running session"
    )

    @field_validator("max_minutes")
    @classmethod
    def validate_max_minutes(cls, v: float) -> float:
        if not 0 < v <= MAX_MINUTES:
            raise ValueError(f"max_minutes must be in (0, {MAX_MINUTES}]")
        return v

    @field_validator("tick_interval_ms")
    @classmethod
    def validate_tick_interval(cls, v: int) -> int:
        if v < 100 or v > 60_000:
            raise ValueError("tick_interval_ms must be between 100 and 60000")
        return v

    @model_validator(mode="after")
    def validate_default_in_range(self) -> FocusConfig:
        if not 0 < self.default_minutes <= self.max_minutes:
            raise ValueError("default_minutes must be in (0, max_minutes]")
        return self


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")
    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main Focus Session configuration."""

    focus: FocusConfig = Field(default_factory=FocusConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def get_value(self, key: str):
        """Get a value by dotted key (e.g. ``focus.default_minutes``)."""
        section_name, _, field_name = key.partition(".")
        section = getattr(self, section_name, None)
        if not isinstance(section, BaseModel) or field_name not in type(section).model_fields:
            raise KeyError(key)
        return getattr(section, field_name)

    def with_value(self, key: str, value) -> AppConfig:
        """Return a validated copy with the dotted *key* set to *value*."""
        self.get_value(key)
        section_name, _, field_name = key.partition(".")
        data = self.model_dump()
        data[section_name][field_name] = value
        return AppConfig.model_validate(data)
