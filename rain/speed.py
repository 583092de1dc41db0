from enum import Enum


class RainSpeed(Enum):
    """Named speed tiers. Slower tiers tick less often and grow longer trails."""

    VERY_SLOW = "very-slow"
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"
    VERY_FAST = "very-fast"

    @classmethod
    def default(cls) -> "RainSpeed":
        return cls.MEDIUM

    @classmethod
    def all_speeds(cls) -> list:
        return list(cls)

    @classmethod
    def from_name(cls, name: str) -> "RainSpeed":
        key = (name or "").strip().lower().replace("_", "-")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown speed: {name}") from None

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()

    def update_interval_ms(self) -> int:
        return _INTERVAL_MS[self]

    def speed_multiplier(self) -> float:
        return _MULTIPLIER[self]

    def max_trail_length(self) -> int:
        return _MAX_TRAIL[self]

    def next(self) -> "RainSpeed":
        speeds = list(RainSpeed)
        return speeds[(speeds.index(self) + 1) % len(speeds)]


_INTERVAL_MS = {
    RainSpeed.VERY_SLOW: 150,
    RainSpeed.SLOW: 100,
    RainSpeed.MEDIUM: 50,
    RainSpeed.FAST: 30,
    RainSpeed.VERY_FAST: 15,
}

# Medium is the 1.0 baseline
_MULTIPLIER = {
    RainSpeed.VERY_SLOW: 0.5,
    RainSpeed.SLOW: 0.75,
    RainSpeed.MEDIUM: 1.0,
    RainSpeed.FAST: 1.5,
    RainSpeed.VERY_FAST: 2.0,
}

_MAX_TRAIL = {
    RainSpeed.VERY_SLOW: 30,
    RainSpeed.SLOW: 25,
    RainSpeed.MEDIUM: 20,
    RainSpeed.FAST: 15,
    RainSpeed.VERY_FAST: 12,
}

_ALIASES = {
    "very-slow": RainSpeed.VERY_SLOW,
    "veryslow": RainSpeed.VERY_SLOW,
    "vs": RainSpeed.VERY_SLOW,
    "slow": RainSpeed.SLOW,
    "s": RainSpeed.SLOW,
    "medium": RainSpeed.MEDIUM,
    "med": RainSpeed.MEDIUM,
    "m": RainSpeed.MEDIUM,
    "fast": RainSpeed.FAST,
    "f": RainSpeed.FAST,
    "very-fast": RainSpeed.VERY_FAST,
    "veryfast": RainSpeed.VERY_FAST,
    "vf": RainSpeed.VERY_FAST,
}
