from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from password_gate.wordlists import BANNED_SUBSTRINGS, COMMON_PASSWORDS, load_wordlist

CLASS_COUNT = 4


class PolicyConfig(BaseModel):
    """Immutable thresholds and word lists the policy rules read."""

    model_config = ConfigDict(frozen=True)

    min_length: int = Field(default=8, ge=1)
    max_length: int = Field(default=64, ge=1)
    min_classes_required: int = Field(default=3, ge=1, le=CLASS_COUNT)
    max_consecutive_repeat: int = Field(default=2, ge=1)
    denylist: frozenset[str] = COMMON_PASSWORDS
    banned_substrings: tuple[str, ...] = BANNED_SUBSTRINGS

    @field_validator("denylist")
    @classmethod
    def _lower_denylist(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(word.lower() for word in v)

    @field_validator("banned_substrings")
    @classmethod
    def _lower_substrings(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not word for word in v):
            raise ValueError("banned substrings must not be empty")
        return tuple(word.lower() for word in v)

    @model_validator(mode="after")
    def _check_length_bounds(self) -> "PolicyConfig":
        if self.min_length >= self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must be less than "
                f"max_length ({self.max_length})"
            )
        return self


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PASSWORD_POLICY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Policy thresholds
    min_length: int = Field(default=8)
    max_length: int = Field(default=64)
    min_classes_required: int = Field(default=3)
    max_consecutive_repeat: int = Field(default=2)

    # Word list overrides (newline separated files)
    denylist_file: str | None = Field(default=None)
    banned_substrings_file: str | None = Field(default=None)

    # App
    log_level: str = Field(default="INFO")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    @cached_property
    def policy(self) -> PolicyConfig:
        """Build the policy once; raises ValidationError on bad values."""
        denylist = COMMON_PASSWORDS
        if self.denylist_file:
            denylist = frozenset(load_wordlist(self.denylist_file))

        banned = BANNED_SUBSTRINGS
        if self.banned_substrings_file:
            banned = tuple(load_wordlist(self.banned_substrings_file))

        return PolicyConfig(
            min_length=self.min_length,
            max_length=self.max_length,
            min_classes_required=self.min_classes_required,
            max_consecutive_repeat=self.max_consecutive_repeat,
            denylist=denylist,
            banned_substrings=banned,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def get_policy_config() -> PolicyConfig:
    return get_settings().policy
