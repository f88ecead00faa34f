"""
friendgraph Settings Management

File Purpose: User settings persistence and validation
Primary Functions/Classes: SettingsManager
Inputs and Outputs (I/O): Settings file I/O

This module loads the command line driver's defaults from a JSON file, ignoring
keys it does not know, and writes them back on request.
"""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import SettingsError
from .models import AnalyticsSettings, CentralityKind

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "~/.friendgraph/settings.json"


class SettingsManager:
    """Manages user settings and preferences."""

    def __init__(self, settings_file: Optional[Path] = None, strict: bool = False):
        self.settings_file = Path(settings_file or DEFAULT_SETTINGS_FILE).expanduser()
        self.strict = strict
        self.settings = self._load_user_settings()

    def _load_user_settings(self) -> AnalyticsSettings:
        """Load settings from file or create defaults."""
        if not self.settings_file.exists():
            return AnalyticsSettings()

        try:
            with open(self.settings_file, "r") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            settings = self._apply(AnalyticsSettings(), data)
        except (OSError, TypeError, ValueError) as e:
            if self.strict:
                raise SettingsError(
                    "Could not load settings",
                    details=str(self.settings_file),
                    original_error=e,
                )
            logger.warning("Ignoring settings file %s: %s", self.settings_file, e)
            return AnalyticsSettings()

        logger.debug("Loaded settings from %s", self.settings_file)
        return settings

    @staticmethod
    def _apply(base: AnalyticsSettings, data: Dict[str, Any]) -> AnalyticsSettings:
        known = {f.name for f in fields(base)}
        for k, v in data.items():
            if k in known:
                setattr(base, k, v)
            else:
                logger.debug("Unknown setting '%s' ignored", k)

        if isinstance(base.default_top_n, bool) or not isinstance(base.default_top_n, int) or base.default_top_n < 1:
            raise ValueError(f"default_top_n must be a positive integer, got {base.default_top_n!r}")
        # Raises InvalidArgumentError (a ValueError) for an unknown kind
        CentralityKind.parse(base.default_kind)
        base.isolated_closeness = float(base.isolated_closeness)
        base.log_level = str(base.log_level).upper()
        if not isinstance(logging.getLevelName(base.log_level), int):
            raise ValueError(f"Unknown log level {base.log_level!r}")
        return base

    def save_user_settings(self) -> None:
        """Save current settings to file."""
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w") as f:
            json.dump(asdict(self.settings), f, indent=2)
        logger.info("Saved settings to %s", self.settings_file)
