"""Layered JSON configuration.

Config is merged from global and local files:
1. ~/.config/activity-geometry/activity-geometry.json (global, loaded first)
2. ./activity-geometry.json (local, overrides global)

Engine functions never read configuration; callers build parameters from it.
"""

import json
import logging
from pathlib import Path

from activity_geometry.climbs import ClimbParams

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "activity-geometry"
CONFIG_PATH = CONFIG_DIR / "activity-geometry.json"
LOCAL_CONFIG_PATH = Path("activity-geometry.json")

DEFAULTS = {
    "min_gradient": 4.0,
    "min_length": 500.0,
    "dip_tolerance": -3.5,
    "smoothing": 0.0,
    "profile_stride": 25,
    "unhighlighted_decay": 0.2,
    "split_distance": 1000.0,
    "chart_width": 600.0,
    "chart_height": 150.0,
    "route_size": 800.0,
    "route_padding": 40.0,
    "climb_chart_width": 200.0,
    "climb_chart_height": 60.0,
    "climb_chart_points": 100,
    "fill_colors": ["#ff6600", "#ffb399"],
}


def load_config() -> dict:
    """Load configuration from config files.

    Returns:
        Dict with merged config values, empty dict if no files exist.
    """
    config = {}
    for config_path in [CONFIG_PATH, LOCAL_CONFIG_PATH]:
        if config_path.exists():
            try:
                with config_path.open() as f:
                    config.update(json.load(f))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Skipping unreadable config file %s: %s", config_path, e)
                continue
    return config


def get_setting(config: dict, key: str):
    """Configured value for key, falling back to DEFAULTS."""
    return config.get(key, DEFAULTS[key])


def climb_params_from_config(config: dict) -> ClimbParams:
    """Build validated climb detection thresholds from a config dict.

    Raises:
        InvalidParameterError: If the configured thresholds are invalid.
    """
    params = ClimbParams(
        min_gradient_percent=float(get_setting(config, "min_gradient")),
        min_length_m=float(get_setting(config, "min_length")),
        dip_tolerance_percent=float(get_setting(config, "dip_tolerance")),
    )
    params.validate()
    return params
