from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from travel_calc.api.dependencies import vehicle_table
from travel_calc.data.loaders import VehicleTable


router = APIRouter()


@router.get("/health")
def health_check(table: VehicleTable = Depends(vehicle_table)) -> Dict[str, Any]:
    """Liveness probe; also confirms the vehicle table is loaded."""
    return {"status": "healthy", "vehicles": len(table)}
