from __future__ import annotations

"""Process-wide rendering settings resolved from the environment."""

import logging
import os
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError
from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS

logger = logging.getLogger(__name__)

ColorSystemName = Literal["standard", "256", "truecolor", "windows"]

DEFAULT_COLOR_SYSTEM: ColorSystemName = "truecolor"


class Settings(BaseModel):
    """
    Rendering settings shared by every Style.

    Attributes:
        color_system: Name of the ANSI color system used when emitting escape
            sequences, or None to emit plain text.
    """

    color_system: Optional[ColorSystemName] = DEFAULT_COLOR_SYSTEM

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from CANOPY_COLOR_SYSTEM, honouring NO_COLOR."""
        if os.environ.get("NO_COLOR"):
            return cls(color_system=None)
        raw = os.environ.get("CANOPY_COLOR_SYSTEM")
        if raw is None:
            return cls()
        raw = raw.strip().lower()
        if raw in ("", "none", "off"):
            return cls(color_system=None)
        try:
            return cls.model_validate({"color_system": raw})
        except ValidationError:
            logger.warning(
                "Ignoring unknown CANOPY_COLOR_SYSTEM %r; using %s", raw, DEFAULT_COLOR_SYSTEM
            )
            return cls()

    def rich_color_system(self) -> Optional[ColorSystem]:
        if self.color_system is None:
            return None
        return COLOR_SYSTEMS[self.color_system]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure(settings: Optional[Settings] = None) -> Settings:
    """Install settings for the process. With no argument, re-read the environment."""
    global _settings
    _settings = settings if settings is not None else Settings.from_env()
    return _settings


__all__ = ["Settings", "ColorSystemName", "get_settings", "configure"]
