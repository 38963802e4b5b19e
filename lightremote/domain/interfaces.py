from __future__ import annotations
from typing import Protocol, Optional, runtime_checkable
from .models import CommandKind, LightState


@runtime_checkable
class Light(Protocol):
    @property
    def is_on(self) -> bool:
        ...

    @property
    def brightness(self) -> int:
        ...

    def turn_on(self) -> None:
        ...

    def turn_off(self) -> None:
        ...

    def set_brightness(self, level: int) -> None:
        ...

    def state(self) -> LightState:
        ...


@runtime_checkable
class Command(Protocol):
    kind: CommandKind

    def execute(self) -> None:
        ...

    def undo(self) -> None:
        ...


@runtime_checkable
class Remote(Protocol):
    @property
    def last_command(self) -> Optional[CommandKind]:
        ...

    def press_on_button(self) -> None:
        ...

    def press_off_button(self) -> None:
        ...

    def press_brightness_button(self, level: Optional[int] = None) -> None:
        ...

    def press_undo_button(self) -> None:
        ...
