from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping

import pandas as pd

from travel_calc.config.settings import settings
from travel_calc.models.vehicle import VehicleProfile

logger = logging.getLogger(__name__)

VehicleTable = Mapping[str, VehicleProfile]

REQUIRED_COLUMNS = ("vehicle", "speed", "efficiency", "tank", "range")


def load_vehicle_table(path: Path) -> VehicleTable:
    """Read the vehicle CSV into a read-only mapping keyed by vehicle id.

    Row order in the file is the iteration order of the result.
    """
    if not path.exists():
        raise FileNotFoundError(f"Vehicle table not found: {path}")
    df = pd.read_csv(path, dtype={"vehicle": str})
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Vehicle table {path} is missing columns: {', '.join(missing)}")

    table = {}
    for row in df.itertuples(index=False):
        vehicle_id = str(row.vehicle).strip()
        table[vehicle_id] = VehicleProfile(
            vehicle_id=vehicle_id,
            speed=float(row.speed),
            efficiency=float(row.efficiency),
            tank=float(row.tank),
            range=float(row.range),
        )
    logger.info("Loaded %d vehicles from %s", len(table), path)
    return MappingProxyType(table)


class VehicleRepository:
    """Loads the vehicle table once and hands out the same mapping afterwards."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or settings.vehicle_table
        self._table: VehicleTable | None = None

    @property
    def vehicles(self) -> VehicleTable:
        if self._table is None:
            self._table = load_vehicle_table(self.path)
        return self._table


_repositories: Dict[Path, VehicleRepository] = {}


def repository_for(path: Path) -> VehicleRepository:
    """One repository per table path, so each CSV is read at most once."""
    repo = _repositories.get(path)
    if repo is None:
        repo = _repositories[path] = VehicleRepository(path)
    return repo


vehicle_repository = repository_for(settings.vehicle_table)


def get_vehicle_table() -> VehicleTable:
    return vehicle_repository.vehicles
