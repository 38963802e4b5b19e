from __future__ import annotations

from typing import NamedTuple, Optional

from .core.config import settings
from .domain.commands import (
    LightOffCommand,
    LightOnCommand,
    LightSetBrightnessCommand,
)
from .domain.remote import RemoteControl
from .drivers.light_sim import SimulatedLight


class RemoteSystem(NamedTuple):
    light: SimulatedLight
    remote: RemoteControl


def create_light_and_remote(strict: Optional[bool] = None) -> RemoteSystem:
    """Build a fresh light and a remote control wired to it."""
    if strict is None:
        strict = settings.strict_brightness

    light = SimulatedLight(strict=strict)
    remote = RemoteControl(
        LightOnCommand(light),
        LightOffCommand(light),
        LightSetBrightnessCommand(light),
    )
    return RemoteSystem(light, remote)
