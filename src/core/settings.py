from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.schemes import IDF_SCHEMES, TF_SCHEMES, normalize_scheme_name
from src.tfidf_kit.exceptions import ConfigurationError


class ScoringSettings(BaseSettings):
    """Environment-backed defaults for scoring and the CLI.

    Reads ``TFIDF_TF_SCHEME``, ``TFIDF_IDF_SCHEME``, ``TFIDF_DOUBLE_K`` and
    ``TFIDF_LOG_LEVEL`` (or the same keys from ``.env``).
    """

    tf_scheme: str = Field(default="double_half_normalization")
    idf_scheme: str = Field(default="inverse_frequency")
    # Only used by the double_normalization TF scheme
    double_k: float = Field(default=0.5, ge=0.0, lt=1.0)
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="TFIDF_",
    )

    @field_validator("tf_scheme", "idf_scheme", mode="before")
    @classmethod
    def _strip_lower(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, str):
            return normalize_scheme_name(v)
        return v

    @field_validator("tf_scheme")
    @classmethod
    def _known_tf(cls, v: str) -> str:
        if v not in TF_SCHEMES:
            raise ValueError(
                f"unknown tf scheme {v!r}; expected one of: {', '.join(sorted(TF_SCHEMES))}"
            )
        return v

    @field_validator("idf_scheme")
    @classmethod
    def _known_idf(cls, v: str) -> str:
        if v not in IDF_SCHEMES:
            raise ValueError(
                f"unknown idf scheme {v!r}; expected one of: {', '.join(sorted(IDF_SCHEMES))}"
            )
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_level(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, str):
            s = v.strip().upper()
            if s not in logging.getLevelNamesMapping():
                raise ValueError(f"unknown log level {v!r}")
            return s
        return v

    @property
    def log_level_value(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


# Cached accessor; call get_settings.cache_clear() after changing the environment
@lru_cache(maxsize=1)
def get_settings() -> ScoringSettings:
    try:
        return ScoringSettings()
    except ValidationError as e:
        raise ConfigurationError(f"invalid TFIDF_* settings: {e}") from e
