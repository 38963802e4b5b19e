from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100
DEFAULT_BRIGHTNESS = 100


class CommandKind(str, Enum):
    ON = "on"
    OFF = "off"
    BRIGHTNESS = "brightness"


@dataclass(frozen=True)
class LightState:
    is_on: bool
    brightness: int


class InvalidBrightnessLevel(ValueError):
    """Raised in strict mode when a brightness falls outside [0, 100]."""

    def __init__(self, level: int) -> None:
        self.level = level
        super().__init__(
            f"Brightness must be between {MIN_BRIGHTNESS} and {MAX_BRIGHTNESS}, got {level}"
        )


def brightness_in_range(level: int) -> bool:
    return MIN_BRIGHTNESS <= level <= MAX_BRIGHTNESS
