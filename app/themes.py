# app/themes.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, List
import json
import logging

from app.state import CharClass

log = logging.getLogger(__name__)


@dataclass
class Theme:
    name: str
    background: str
    primary: str
    secondary: str
    accent: str
    correct: str = "#6b7280"
    error: str = "#ef4444"

    def char_color(self, cls: CharClass) -> str:
        """Colour for one classification tag."""
        return {
            CharClass.CURRENT: self.accent,
            CharClass.PENDING: self.primary,
            CharClass.CORRECT: self.correct,
            CharClass.INCORRECT: self.error,
        }[cls]


# -------- Built-in themes --------
THEMES: List[Theme] = [
    Theme(
        name="Midnight",
        background="#0f1115",
        primary="#e5e7eb",
        secondary="#6b7280",
        accent="#eab308",
        correct="#6b7280",
        error="#ef4444",
    ),
    Theme(
        name="Paper",
        background="#fafafa",
        primary="#111111",
        secondary="#6b6b6b",
        accent="#2563eb",
        correct="#9ca3af",
        error="#dc2626",
    ),
    Theme(
        name="Nord",
        background="#2e3440",
        primary="#eceff4",
        secondary="#88c0d0",
        accent="#ebcb8b",
        correct="#4c566a",
        error="#bf616a",
    ),
]

DEFAULT_THEME_INDEX = 0
_CUSTOM_FILE = Path("themes.json")

_REQUIRED = {"name", "background", "primary", "secondary", "accent"}
_OPTIONAL = {"correct", "error"}


# -------- helpers --------
def _theme_from_dict(d: Dict[str, Any]) -> Theme:
    missing = _REQUIRED - set(d.keys())
    if missing:
        raise ValueError(f"Missing theme keys: {', '.join(sorted(missing))}")
    extra = {k: str(d[k]) for k in _OPTIONAL if k in d}
    return Theme(
        name=str(d["name"]),
        background=str(d["background"]),
        primary=str(d["primary"]),
        secondary=str(d["secondary"]),
        accent=str(d["accent"]),
        **extra,
    )


# -------- public API used by UI --------
def load_custom_themes(path: Path = _CUSTOM_FILE) -> int:
    """Append themes from themes.json (if present). Returns how many were added."""
    if not path.exists():
        return 0
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Ignoring %s: %s", path, e)
        return 0
    if not isinstance(data, list):
        log.warning("Ignoring %s: expected a list of themes", path)
        return 0
    added = 0
    for item in data:
        try:
            THEMES.append(_theme_from_dict(item))
            added += 1
        except (ValueError, AttributeError, TypeError) as e:
            log.warning("Skipping custom theme: %s", e)
    return added
