import copy
import json
from sw.common.logger import log
from sw.common.setup import PATHS
from sw.core.record import State

#region === Defaults and Paths ===

SETTINGS_PATH = PATHS.data / "settings.json"

# Default values for every setting. Records themselves are never saved, only these.
_SETTINGS_DEFAULTS = {
    "datetime_format": "%d/%m/%Y %H:%M",
    "always_on_top": False,
    "confirm_delete": True,
    "seed_sample_records": True,
    "state_colors": {
        State.WAITING.value: "#add8e6",
        State.ACTIVE.value: "#ffffe0",
        State.EXPIRED.value: "#d3d3d3",
        State.FREE.value: "#90ee90",
    },
}

# Helper to return a truly fresh, default settings dict.
def build_default_settings():
    return copy.deepcopy(_SETTINGS_DEFAULTS)

#endregion === Defaults and Paths ===

#region === Saving and Loading Settings ===

# Replaces every value whose type doesn't match its default, and fills anything missing. Returns the set of keys
# that had to be defaulted.
def _validate(settings):
    defaulted_values = set()
    for key, default in _SETTINGS_DEFAULTS.items():
        value = settings.get(key)
        wrong_type = not isinstance(value, type(default))
        if key not in settings or wrong_type:
            defaulted_values.add(key)
            settings[key] = copy.deepcopy(default)

    colors = settings["state_colors"]
    for state in State:
        if not isinstance(colors.get(state.value), str):
            defaulted_values.add(f"state_colors.{state.value}")
            colors[state.value] = _SETTINGS_DEFAULTS["state_colors"][state.value]
    return defaulted_values

# Loads settings from PATHS.data / settings.json, filling defaults for anything missing or malformed.
def load_settings():
    if not SETTINGS_PATH.exists():
        log.info("No existing settings.json found, loading fresh settings dict.")
        return build_default_settings()
    try:
        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise TypeError(f"Expected a JSON object, got {type(settings).__name__}")
    # Fall back to fresh settings in case of error, but warn in log
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load settings.json, falling back to fresh settings.",exc_info=True)
        return build_default_settings()

    defaulted_values = _validate(settings)
    if defaulted_values:
        log.warning(f"Loaded settings from '{SETTINGS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
    else:
        log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
    return settings

# Write the given settings to disk under PATHS.data / settings.json
def save_settings(settings):
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    log.info(f"Successfully saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===
