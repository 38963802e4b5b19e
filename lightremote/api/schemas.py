from __future__ import annotations
from pydantic import BaseModel
from typing import Optional


class BrightnessRequest(BaseModel):
    # Range is checked by the light so strict/lenient mode decides the outcome
    level: Optional[int] = None


class LightStatus(BaseModel):
    is_on: bool
    brightness: int
    last_command: Optional[str] = None
