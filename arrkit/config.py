"""CLI Configuration — environment-driven defaults via pydantic-settings.

Invariants:
    - Only the CLI shell reads settings; core functions take explicit parameters
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - ARRKIT_ prefix: library settings never collide with the host application's
"""

import hashlib
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the arrkit CLI, overridable per environment."""

    model_config = SettingsConfigDict(
        env_prefix="ARRKIT_", env_file=".env", extra="ignore", case_sensitive=False,
    )

    # Fingerprint
    hash_algorithm: str = "md5"
    hash_orderless: bool = True

    @field_validator("hash_algorithm", mode="before")
    @classmethod
    def check_algorithm(cls, v: str) -> str:
        v = str(v).strip().lower()
        if v not in hashlib.algorithms_available or v.startswith("shake_"):
            raise ValueError(f"unsupported hash algorithm: {v}")
        return v

    # Compare / top-k
    compare_strict: bool = True
    top_k_default_count: int = Field(1, ge=1)

    # Observability
    log_level: str = "WARNING"
    log_format: str = Field("text", pattern=r"^(json|text)$")


@lru_cache
def get_settings() -> Settings:
    return Settings()
