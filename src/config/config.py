"""
Load .env from project root; expose INPUT_DIR, OUTPUT_DIR, MINDMAP_* layout overrides.
Call load_env() before using in main or other modules.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# env var -> LayoutConfig field
LAYOUT_ENV_KEYS = {
    "MINDMAP_NODE_HEIGHT": "node_height",
    "MINDMAP_NODE_PADDING": "node_padding",
    "MINDMAP_LEVEL_GAP": "level_gap",
    "MINDMAP_SIBLING_GAP": "sibling_gap",
    "MINDMAP_MIN_NODE_WIDTH": "min_node_width",
    "MINDMAP_CHAR_WIDTH": "char_width",
}


def _project_root() -> Path:
    """Nearest ancestor of this file holding src/ or data/; else the working directory."""
    for candidate in list(Path(__file__).resolve().parents)[:3]:
        if any((candidate / name).is_dir() for name in ("src", "data")):
            return candidate
    return Path.cwd()


def _parse_env_line(raw: str) -> tuple[str, str] | None:
    """KEY=VALUE with optional quotes; None for blanks, comments and empty keys or values."""
    line = raw.strip()
    if not line or line.startswith("#"):
        return None
    key, sep, value = line.partition("=")
    key, value = key.strip(), value.strip().strip("'\"")
    if not sep or not key or not value:
        return None
    return key, value


def load_env() -> None:
    """Copy .env entries from the project root into os.environ; existing variables win."""
    env_file = _project_root() / ".env"
    if not env_file.is_file():
        return
    for raw in env_file.read_text(encoding="utf-8").splitlines():
        entry = _parse_env_line(raw)
        if entry is not None:
            os.environ.setdefault(*entry)


def get_input_dir() -> Path:
    """Outline source directory; default <project_root>/data/outlines."""
    load_env()
    input_dir = os.environ.get("INPUT_DIR")
    if input_dir:
        return Path(input_dir)
    return _project_root() / "data" / "outlines"


def get_output_dir() -> Path:
    """Where tree.json / layout.json / .xmind go; default <project_root>/output."""
    load_env()
    output_dir = os.environ.get("OUTPUT_DIR")
    if output_dir:
        return Path(output_dir)
    return _project_root() / "output"


def get_layout_settings() -> dict[str, int]:
    """
    Layout overrides from MINDMAP_* env vars, keyed by LayoutConfig field name.
    Values that are not non-negative integers are skipped with a warning.
    """
    load_env()
    settings: dict[str, int] = {}
    for key, field_name in LAYOUT_ENV_KEYS.items():
        raw = os.environ.get(key)
        if raw is None or not raw.strip():
            continue
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r: not an integer", key, raw)
            continue
        if value < 0:
            logger.warning("Ignoring %s=%d: must not be negative", key, value)
            continue
        settings[field_name] = value
    return settings
