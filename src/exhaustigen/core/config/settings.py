from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Global library configuration.

    This class is the single source of truth for:
    - environment selection
    - logging behavior
    - protocol checking defaults for new generators
    - the default pass limit of the enumeration driver
    """

    model_config = SettingsConfigDict(
        env_prefix="EXHAUSTIGEN_",
        env_file=".env",
        extra="ignore",
    )

    # ---- Environment -------------------------------------------------

    env: Literal["local", "ci", "prod"] = "local"

    # ---- Logging -----------------------------------------------------

    log_level: str = "INFO"

    # ---- Enumeration -------------------------------------------------

    strict: bool = Field(
        default=True,
        description="Check that every pass replays the previous pass's draw bounds",
    )

    max_passes: Optional[int] = Field(
        default=None,
        gt=0,
        description="Default pass limit for run(); unset means unlimited",
    )


# Singleton settings object
settings = AppSettings()
