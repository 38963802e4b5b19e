from __future__ import annotations
import logging
from threading import Lock
from typing import Optional

from ..domain.models import LightState
from ..factory import RemoteSystem, create_light_and_remote

logger = logging.getLogger(__name__)


class RemotePanel:
    """
    Serialises button presses from a threaded host onto one light/remote pair.

    The light and its remote are not synchronised internally, so every press
    and every read goes through the same lock.
    """

    def __init__(self, system: Optional[RemoteSystem] = None) -> None:
        self._system = system or create_light_and_remote()
        self._lock = Lock()

    def status(self) -> dict:
        with self._lock:
            return self._status()

    def press_on(self) -> dict:
        with self._lock:
            self._system.remote.press_on_button()
            return self._status()

    def press_off(self) -> dict:
        with self._lock:
            self._system.remote.press_off_button()
            return self._status()

    def press_brightness(self, level: Optional[int]) -> dict:
        with self._lock:
            self._system.remote.press_brightness_button(level)
            return self._status()

    def press_undo(self) -> dict:
        with self._lock:
            self._system.remote.press_undo_button()
            return self._status()

    def _status(self) -> dict:
        s: LightState = self._system.light.state()
        last = self._system.remote.last_command
        return {
            "is_on": s.is_on,
            "brightness": s.brightness,
            "last_command": last.value if last else None,
        }
