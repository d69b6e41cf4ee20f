"""YAML-based export profiles.

A profile supplies CLI defaults so repeated exports of the same program do
not need the same flags every time::

    default:
      out: ./acme-scope
      log_level: WARNING
      text: false
      skip_tables: false
      extension: .txt
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

PROFILE_KEYS: frozenset[str] = frozenset({"out", "log_level", "text", "skip_tables", "extension"})


class ProfileError(ValueError):
    """Raised when a profile cannot be read or is not a mapping."""


def load_profile(path: str | Path) -> dict[str, Any]:
    """Return the recognised ``default`` settings of the profile at *path*.

    Unknown keys are ignored.  A missing or empty ``default`` section yields
    an empty dict.
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ProfileError(f"Cannot load profile {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ProfileError(f"Profile {path} must be a mapping, got {type(data).__name__}")
    default = data.get("default") or {}
    if not isinstance(default, dict):
        raise ProfileError(f"Profile {path}: 'default' must be a mapping")

    return {key: value for key, value in default.items() if key in PROFILE_KEYS}
