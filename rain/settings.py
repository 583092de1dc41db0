import json
import os
import config
from rain.charsets import CharacterSet
from rain.colors import ColorScheme
from rain.logger import log
from rain.options import RainConfig
from rain.speed import RainSpeed

_TRUE_WORDS = {"true", "1", "yes", "on"}
_FALSE_WORDS = {"false", "0", "no", "off"}

def _parse_flag(text):
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"Not a true/false value: {text}")

class SettingsManager:
    def __init__(self, settings_path=None):
        self.settings_path = settings_path or config.SETTINGS_PATH
        self.defaults = {
            "character_set": CharacterSet.default().value,
            "color_scheme": ColorScheme.default().value,
            "speed": RainSpeed.default().value,
            "background_layer": True,

            # Graphical window
            "window_width": 960,
            "window_height": 600,
            "overlay_locked": True,
        }
        self.settings = self.load_settings()

    def _warn_and_prune_unknown_keys(self, raw: dict) -> dict:
        if not isinstance(raw, dict):
            return {}

        known = set(self.defaults.keys())
        unknown = sorted([k for k in raw.keys() if k not in known])
        if unknown:
            log(f"Unknown settings keys ignored: {unknown}", "warning")
        return {k: v for k, v in raw.items() if k in known}

    def load_settings(self):
        if not os.path.exists(self.settings_path):
            return self.defaults.copy()

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                data = self._warn_and_prune_unknown_keys(data)
                # Merge with defaults to ensure all keys exist
                merged = self.defaults.copy()
                merged.update(data)
                return merged
        except (OSError, ValueError) as e:
            log(f"Error loading settings: {e}", "error")
            return self.defaults.copy()

    def save_settings(self):
        try:
            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=4)
            log("Settings saved.", "info")
        except OSError as e:
            log(f"Error saving settings: {e}", "error")

    def get(self, key):
        return self.settings.get(key, self.defaults.get(key))

    def set(self, key, value):
        if key not in self.defaults:
            log(f"Attempt to set unknown setting ignored: {key}", "warning")
            return
        self.settings[key] = value
        self.save_settings()

    def _parse(self, key, parser):
        try:
            return parser(str(self.get(key)))
        except ValueError as e:
            log(f"Invalid stored {key}: {e}. Using default.", "warning")
            return parser(self.defaults[key])

    def to_rain_config(self, width=None, height=None) -> RainConfig:
        return RainConfig(
            character_set=self._parse("character_set", CharacterSet.from_name),
            color_scheme=self._parse("color_scheme", ColorScheme.from_name),
            speed=self._parse("speed", RainSpeed.from_name),
            screen_width=int(width or config.DEFAULT_SCREEN_WIDTH),
            screen_height=int(height or config.DEFAULT_SCREEN_HEIGHT),
            enable_background_layer=self._parse("background_layer", _parse_flag),
        )

    def store_rain_config(self, rain_config: RainConfig):
        self.settings["character_set"] = rain_config.character_set.value
        self.settings["color_scheme"] = rain_config.color_scheme.value
        self.settings["speed"] = rain_config.speed.value
        self.settings["background_layer"] = rain_config.enable_background_layer
        self.save_settings()

# Global singleton
manager = SettingsManager()
