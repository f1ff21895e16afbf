"""Persistent settings for the Yahtzee rule catalog.

Stores flat award amounts and display preferences in ~/.yahtzee_rules.json.
"""

import json
import logging
from pathlib import Path

from rules import make_catalog

logger = logging.getLogger(__name__)

AWARD_KEYS = ("full_house", "small_straight", "large_straight", "yahtzee")

DEFAULTS = {
    "full_house": 25,
    "small_straight": 30,
    "large_straight": 40,
    "yahtzee": 50,
    "show_descriptions": True,
}


def _default_path():
    """Return the default path for the settings file."""
    return Path.home() / ".yahtzee_rules.json"


def _valid(key, value):
    if key in AWARD_KEYS:
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    return isinstance(value, type(DEFAULTS[key]))


def load_settings(path=None):
    """Load settings from JSON file. Returns DEFAULTS on missing/corrupt.

    Merges with DEFAULTS so missing keys get default values.
    Unknown keys are ignored, and a value of the wrong type keeps its default.
    """
    if path is None:
        path = _default_path()
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return dict(DEFAULTS)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return dict(DEFAULTS)
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return dict(DEFAULTS)

    result = dict(DEFAULTS)
    for key in DEFAULTS:
        if key not in data:
            continue
        if _valid(key, data[key]):
            result[key] = data[key]
        else:
            logger.warning("Invalid value for %s in %s: %r", key, path, data[key])
    return result


def save_settings(settings, path=None):
    """Write settings dict to JSON. Silently ignores write errors."""
    if path is None:
        path = _default_path()
    path = Path(path)
    try:
        path.write_text(json.dumps(settings, indent=2))
    except OSError:
        pass


def catalog_from_settings(settings):
    """Build a rule catalog using the award amounts in settings."""
    return make_catalog(**{key: settings[key] for key in AWARD_KEYS})
