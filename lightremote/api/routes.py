from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..core.config import settings
from ..domain.models import InvalidBrightnessLevel
from ..services.panel import RemotePanel
from .schemas import BrightnessRequest, LightStatus

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Dependency getters ---
# main.py replaces this via app.dependency_overrides.
def get_panel() -> RemotePanel:  # overridden in main
    raise RuntimeError("Remote panel dependency not configured")


@router.get("/light", response_model=LightStatus)
def get_light(panel: RemotePanel = Depends(get_panel)):
    return panel.status()


@router.post("/remote/on", response_model=LightStatus)
def press_on(panel: RemotePanel = Depends(get_panel)):
    return panel.press_on()


@router.post("/remote/off", response_model=LightStatus)
def press_off(panel: RemotePanel = Depends(get_panel)):
    return panel.press_off()


@router.post("/remote/brightness", response_model=LightStatus)
def press_brightness(req: BrightnessRequest, panel: RemotePanel = Depends(get_panel)):
    try:
        return panel.press_brightness(req.level)
    except InvalidBrightnessLevel as e:
        logger.warning("Rejected brightness level %s", e.level)
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/remote/undo", response_model=LightStatus)
def press_undo(panel: RemotePanel = Depends(get_panel)):
    return panel.press_undo()


# --- Settings ---
@router.get("/settings")
def get_settings():
    return {"settings": settings.model_dump()}
