import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TRUE_STRINGS = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Package-wide options, read once when fnkit is imported.

    Attributes:
        disable_shortcuts: Do not define the ``p`` shortcut for ``partial``.
        log_level: Level of the package logger.
    """

    model_config = ConfigDict(frozen=True)

    disable_shortcuts: bool = Field(
        False, description="Skip defining the `p` shortcut for `partial`."
    )
    log_level: str = Field("INFO", description="Level of the fnkit logger.")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return value

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Build settings from an optional JSON file and the environment.

        The file is ``path`` or, when not given, the one named by
        ``FNKIT_CONFIG`` (an empty value counts as unset).
        ``FNKIT_DISABLE_SHORTCUTS`` and ``LOG_LEVEL`` override values from the
        file.
        """
        values: Dict[str, Any] = {}

        config_path = path or os.getenv("FNKIT_CONFIG") or None
        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.exists():
                raise FileNotFoundError(f"fnkit config file not found at {config_path}")
            with open(config_path, "r") as f:
                values.update(json.load(f))

        disable = os.getenv("FNKIT_DISABLE_SHORTCUTS")
        if disable is not None:
            values["disable_shortcuts"] = disable.strip().lower() in _TRUE_STRINGS

        level = os.getenv("LOG_LEVEL")
        if level:
            values["log_level"] = level

        return cls(**values)


settings = Settings.load()
