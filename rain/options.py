import json
from dataclasses import dataclass, field, replace as dc_replace

import config
from rain.charsets import CharacterSet
from rain.colors import ColorScheme
from rain.logger import log
from rain.speed import RainSpeed


@dataclass(frozen=True)
class RainConfig:
    """Everything the engine needs to know about what to draw and where.

    Instances are validated on construction and never mutated; build a new
    one with ``replace`` or ``with_size`` to reconfigure a running engine.
    """

    character_set: CharacterSet = field(default_factory=CharacterSet.default)
    color_scheme: ColorScheme = field(default_factory=ColorScheme.default)
    speed: RainSpeed = field(default_factory=RainSpeed.default)
    screen_width: int = config.DEFAULT_SCREEN_WIDTH
    screen_height: int = config.DEFAULT_SCREEN_HEIGHT
    enable_background_layer: bool = True

    def __post_init__(self):
        for name in ("screen_width", "screen_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.character_set, CharacterSet):
            raise ValueError(f"character_set must be a CharacterSet, got {self.character_set!r}")
        if not isinstance(self.color_scheme, ColorScheme):
            raise ValueError(f"color_scheme must be a ColorScheme, got {self.color_scheme!r}")
        if not isinstance(self.speed, RainSpeed):
            raise ValueError(f"speed must be a RainSpeed, got {self.speed!r}")

    def replace(self, **changes) -> "RainConfig":
        return dc_replace(self, **changes)

    def with_size(self, width: int, height: int) -> "RainConfig":
        return dc_replace(self, screen_width=width, screen_height=height)

    def to_dict(self) -> dict:
        return {
            "character_set": self.character_set.value,
            "color_scheme": self.color_scheme.value,
            "speed": self.speed.value,
            "screen_width": self.screen_width,
            "screen_height": self.screen_height,
            "enable_background_layer": self.enable_background_layer,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RainConfig":
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping, got {type(data).__name__}")

        known = {"character_set", "color_scheme", "speed", "screen_width",
                 "screen_height", "enable_background_layer"}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            log(f"Unknown config keys ignored: {unknown}", "warning")

        kwargs = {}
        if "character_set" in data:
            kwargs["character_set"] = CharacterSet.from_name(data["character_set"])
        if "color_scheme" in data:
            kwargs["color_scheme"] = ColorScheme.from_name(data["color_scheme"])
        if "speed" in data:
            kwargs["speed"] = RainSpeed.from_name(data["speed"])
        for key in ("screen_width", "screen_height"):
            if key in data:
                kwargs[key] = data[key]
        if "enable_background_layer" in data:
            kwargs["enable_background_layer"] = bool(data["enable_background_layer"])
        return cls(**kwargs)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=4)

    @classmethod
    def from_json(cls, text: str) -> "RainConfig":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid config JSON: {e}") from e
        return cls.from_dict(data)
