from __future__ import annotations
import logging

from ..domain.models import (
    DEFAULT_BRIGHTNESS,
    InvalidBrightnessLevel,
    LightState,
    brightness_in_range,
)

logger = logging.getLogger(__name__)


class SimulatedLight:
    def __init__(self, strict: bool = False) -> None:
        self._on = False
        self._brightness = DEFAULT_BRIGHTNESS
        self._strict = strict

    @property
    def is_on(self) -> bool:
        return self._on

    @property
    def brightness(self) -> int:
        return self._brightness

    def state(self) -> LightState:
        return LightState(is_on=self._on, brightness=self._brightness)

    def turn_on(self) -> None:
        self._on = True
        logger.info("LIGHT turn_on")

    def turn_off(self) -> None:
        self._on = False
        logger.info("LIGHT turn_off (brightness kept at %s)", self._brightness)

    def set_brightness(self, level: int) -> None:
        if not brightness_in_range(level):
            if self._strict:
                raise InvalidBrightnessLevel(level)
            logger.warning("LIGHT ignoring out-of-range brightness=%s", level)
            return
        self._brightness = level
        self._on = level > 0
        logger.info("LIGHT set_brightness=%s on=%s", self._brightness, self._on)
