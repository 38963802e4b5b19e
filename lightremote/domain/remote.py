from __future__ import annotations
import logging
from typing import Optional

from .commands import (
    LightCommand,
    LightOffCommand,
    LightOnCommand,
    LightSetBrightnessCommand,
)
from .models import CommandKind

logger = logging.getLogger(__name__)


class RemoteControl:
    def __init__(
        self,
        on_command: LightOnCommand,
        off_command: LightOffCommand,
        brightness_command: LightSetBrightnessCommand,
    ) -> None:
        self._on_command = on_command
        self._off_command = off_command
        self._brightness_command = brightness_command
        self._last_command: Optional[LightCommand] = None

    @property
    def last_command(self) -> Optional[CommandKind]:
        if self._last_command is None:
            return None
        return self._last_command.kind

    def press_on_button(self) -> None:
        logger.info("button: ON")
        self._on_command.execute()
        self._last_command = self._on_command

    def press_off_button(self) -> None:
        logger.info("button: OFF")
        self._off_command.execute()
        self._last_command = self._off_command

    def press_brightness_button(self, level: Optional[int] = None) -> None:
        logger.info("button: BRIGHTNESS level=%s", level)
        self._brightness_command.execute(level)
        self._last_command = self._brightness_command

    def press_undo_button(self) -> None:
        if self._last_command is None:
            logger.info("button: UNDO (nothing to undo)")
            return
        # The slot is kept, so a second undo reverses the same command again
        logger.info("button: UNDO %s", self._last_command.kind.value)
        self._last_command.undo()
