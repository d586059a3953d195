"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from models.diff import LinePairing
from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    pairing: LinePairing | None = None
    maxTableCells: int | None = None
    encoding: str | None = None
    server: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    pairing: LinePairing
    maxTableCells: int
    encoding: str
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config_manager = ConfigManager.get_instance()
    config = config_manager.get_config()

    return ConfigResponse(
        pairing=config_manager.get_pairing(),
        maxTableCells=config_manager.get_max_table_cells() or 0,
        encoding=config_manager.get_encoding(),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.pairing:
        current_config["pairing"] = request.pairing.value
    if request.maxTableCells is not None:
        current_config["maxTableCells"] = request.maxTableCells
    if request.encoding:
        try:
            "".encode(request.encoding)
        except LookupError:
            raise HTTPException(status_code=400, detail=f"Unknown encoding: {request.encoding}")
        current_config["encoding"] = request.encoding
    if request.server:
        current_config["server"] = {**current_config.get("server", {}), **request.server}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
