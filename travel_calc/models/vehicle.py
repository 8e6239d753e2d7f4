from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class VehicleProfile:
    vehicle_id: str
    speed: float  # km/h
    efficiency: float  # km per litre
    tank: float  # litres
    # Stored as published; not always tank * efficiency.
    range: float  # km

    def to_dict(self) -> Dict[str, float]:
        return {
            "speed": self.speed,
            "efficiency": self.efficiency,
            "tank": self.tank,
            "range": self.range,
        }
