from __future__ import annotations

from typing import Any

_IMAGE_BASE = "https://digitalassets.tesla.com/tesla-contents/image/upload/f_auto,q_auto"

# Keyed by the catalog "Model" column
VEHICLE_ASSETS: dict[str, dict[str, Any]] = {
    "Model 3": {"id": "model3", "image": f"{_IMAGE_BASE}/Homepage-Model-3-Desktop-LHD.png"},
    "Model Y": {"id": "modelY", "image": f"{_IMAGE_BASE}/Homepage-Model-Y-Desktop-Global.png"},
    "Model S": {"id": "modelS", "image": f"{_IMAGE_BASE}/Homepage-Model-S-Desktop-LHD.png"},
    "Model X": {"id": "modelX", "image": f"{_IMAGE_BASE}/Homepage-Model-X-Desktop-LHD.png"},
    "Cybertruck": {"id": "cybertruck", "image": f"{_IMAGE_BASE}/Homepage-Cybertruck-Desktop.png"},
}

UNKNOWN_ASSET: dict[str, Any] = {"id": "unknown", "image": None}


def asset_for(model_name: str, assets: dict[str, dict[str, Any]] = VEHICLE_ASSETS) -> dict[str, Any]:
    """Return the id/image entry for a model, or the ``unknown`` placeholder."""
    return assets.get(model_name, UNKNOWN_ASSET)
