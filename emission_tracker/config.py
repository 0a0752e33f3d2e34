from __future__ import annotations

"""Tracker configuration.

Settings live in a small YAML file (`config/tracker.yaml` by default). A
missing file yields the defaults; unknown keys are ignored with a warning so
older config files keep loading.
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional
import logging

import yaml

from .io_paths import DATA_DIR, DEFAULT_CONFIG_FILE, LOGS_DIR

logger = logging.getLogger(__name__)


class FormResetPolicy(Enum):
    """When the draft form is cleared."""
    NEVER = "never"
    ON_CLOSE = "on_close"
    ON_SUCCESS = "on_success"


class UnknownRowActionPolicy(Enum):
    """What to do with row action names that have no navigation."""
    IGNORE = "ignore"
    WARN = "warn"


@dataclass
class TrackerConfig:
    """Runtime settings for the tracker widget and its Streamlit host."""

    object_api_name: str = "Carbon_Emission__c"
    data_dir: Path = field(default_factory=lambda: DATA_DIR)
    log_dir: Path = field(default_factory=lambda: LOGS_DIR)
    debug: bool = False
    form_reset_policy: FormResetPolicy = FormResetPolicy.NEVER
    unknown_row_action: UnknownRowActionPolicy = UnknownRowActionPolicy.IGNORE
    list_view_filter: str = "Recent"

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> "TrackerConfig":
        """Build a config from a plain mapping, coercing paths and enums.

        Relative paths are resolved against `base_dir` when given.
        """
        known = {f.name for f in fields(cls)}
        config = cls()
        updates: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key: {key}")
                continue
            if value is None:
                continue
            if key in ("data_dir", "log_dir"):
                path = Path(str(value)).expanduser()
                if base_dir is not None and not path.is_absolute():
                    path = base_dir / path
                updates[key] = path
            elif key == "form_reset_policy":
                updates[key] = FormResetPolicy(str(value).strip().lower())
            elif key == "unknown_row_action":
                updates[key] = UnknownRowActionPolicy(str(value).strip().lower())
            elif key == "debug":
                updates[key] = bool(value)
            else:
                updates[key] = str(value)
        return replace(config, **updates)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "object_api_name": self.object_api_name,
            "data_dir": str(self.data_dir),
            "log_dir": str(self.log_dir),
            "debug": self.debug,
            "form_reset_policy": self.form_reset_policy.value,
            "unknown_row_action": self.unknown_row_action.value,
            "list_view_filter": self.list_view_filter,
        }


def load_config(path: Optional[Path] = None) -> TrackerConfig:
    """Load `TrackerConfig` from YAML; fall back to defaults if the file is absent.

    Raises:
        ValueError: if the file holds an invalid policy value or is not a mapping
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_FILE
    if not config_path.exists():
        logger.debug(f"No config file at {config_path}; using defaults")
        return TrackerConfig()

    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return TrackerConfig.from_dict(data, base_dir=config_path.parent.parent)


def save_config(config: TrackerConfig, path: Path) -> Path:
    """Write `config` to YAML and return the saved path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, sort_keys=False, allow_unicode=True)
    return path
