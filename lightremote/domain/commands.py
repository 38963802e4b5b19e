from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .interfaces import Light
from .models import DEFAULT_BRIGHTNESS, CommandKind

logger = logging.getLogger(__name__)


class LightCommand(ABC):
    """A reversible action bound to one light."""

    kind: CommandKind

    def __init__(self, light: Light) -> None:
        self._light = light

    @abstractmethod
    def execute(self) -> None:
        ...

    @abstractmethod
    def undo(self) -> None:
        """Reverse the most recent execute()."""
        ...


class LightOnCommand(LightCommand):
    kind = CommandKind.ON

    def execute(self) -> None:
        self._light.turn_on()

    def undo(self) -> None:
        # Unconditional, does not look at the state before execute()
        self._light.turn_off()


class LightOffCommand(LightCommand):
    kind = CommandKind.OFF

    def execute(self) -> None:
        self._light.turn_off()

    def undo(self) -> None:
        self._light.turn_on()


class LightSetBrightnessCommand(LightCommand):
    """
    Sets the brightness and remembers the level it replaced.

    The same instance is reused for every brightness press, so only the
    level before the latest execute() can be restored.
    """

    kind = CommandKind.BRIGHTNESS

    def __init__(self, light: Light) -> None:
        super().__init__(light)
        self._previous_brightness = DEFAULT_BRIGHTNESS

    @property
    def previous_brightness(self) -> int:
        return self._previous_brightness

    def execute(self, level: Optional[int] = None) -> None:
        previous = self._light.brightness
        if level is not None:
            # May raise InvalidBrightnessLevel; the captured level is kept then
            self._light.set_brightness(level)
        self._previous_brightness = previous
        logger.debug("brightness captured previous=%s", previous)

    def undo(self) -> None:
        self._light.set_brightness(self._previous_brightness)
