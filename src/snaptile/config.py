"""
Configuration for SnapTile.

The snap margin and default window size form the behavioral contract of
the engine; everything else tunes placement and viewport handling.
"""

import json
import logging
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from snaptile.models.geometry import Size

CONFIG_FILE = Path.home() / ".snaptile.json"

DEFAULT_WINDOW_WIDTH = 300
DEFAULT_WINDOW_HEIGHT = 200
SNAP_THRESHOLD = 30

logger = logging.getLogger("snaptile.config")


@dataclass
class TilerSettings:
    """
    Tunable engine settings.

    Overriding a value changes geometry, never the algorithms.
    """
    # Contract constants
    default_window_width: float = DEFAULT_WINDOW_WIDTH
    default_window_height: float = DEFAULT_WINDOW_HEIGHT
    snap_threshold: float = SNAP_THRESHOLD

    # Floating placement keeps this much room free at the bottom
    placement_bottom_margin: float = 50
    placement_seed: Optional[int] = None

    # Initial viewport for headless sessions
    viewport_width: float = 1200
    viewport_height: float = 800

    # Rescale descendant regions when the viewport changes
    rescale_on_resize: bool = False

    @property
    def default_window_size(self) -> "Size":
        from snaptile.models.geometry import Size
        return Size(self.default_window_width, self.default_window_height)

    @property
    def viewport_size(self) -> "Size":
        from snaptile.models.geometry import Size
        return Size(self.viewport_width, self.viewport_height)


def load_settings(path: Path = CONFIG_FILE) -> TilerSettings:
    """Load settings from config file."""
    try:
        if path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("expected a JSON object")
                known_fields = {f.name for f in TilerSettings.__dataclass_fields__.values()}
                filtered = {k: v for k, v in data.items() if k in known_fields}
                return TilerSettings(**filtered)
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
    return TilerSettings()


def save_settings(settings: TilerSettings, path: Path = CONFIG_FILE):
    """Save settings to config file."""
    try:
        data = asdict(settings)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        logger.warning(f"Could not save settings to {path}: {e}")
