from __future__ import annotations

from fastapi import Depends

from travel_calc.config.settings import Settings, get_settings
from travel_calc.data.loaders import VehicleTable, repository_for


def vehicle_table(settings: Settings = Depends(get_settings)) -> VehicleTable:
    """The table configured by ``settings.vehicle_table``, loaded on first use."""
    return repository_for(settings.vehicle_table).vehicles
