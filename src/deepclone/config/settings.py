"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the copy engine.

Usage:
    from deepclone.config import CopySettings

    # Load from environment variables (DEEPCLONE_*)
    settings = CopySettings()

    # Or override with explicit values
    settings = CopySettings(preserve_cycles=True)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class CopySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the deep copy engine.

    Attributes:
        preserve_cycles: Track visited originals so cyclic graphs and shared
            sub-objects keep their shape. Off by default: a cyclic graph then
            fails with DeepCopyError caused by RecursionError.
        allow_bare_allocation: When every constructor strategy fails, allocate
            the instance with cls.__new__(cls) instead of failing.
        log_probing: Emit DEBUG records when constructor probing is used.

    Environment Variables:
        DEEPCLONE_PRESERVE_CYCLES
        DEEPCLONE_ALLOW_BARE_ALLOCATION
        DEEPCLONE_LOG_PROBING
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEPCLONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    preserve_cycles: bool = False
    allow_bare_allocation: bool = False
    log_probing: bool = True
