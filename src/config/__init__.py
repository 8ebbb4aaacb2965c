"""Config: load .env, expose INPUT_DIR, OUTPUT_DIR and MINDMAP_* layout overrides."""
from .config import (
    LAYOUT_ENV_KEYS,
    load_env,
    get_input_dir,
    get_output_dir,
    get_layout_settings,
)

__all__ = [
    "LAYOUT_ENV_KEYS",
    "load_env",
    "get_input_dir",
    "get_output_dir",
    "get_layout_settings",
]
