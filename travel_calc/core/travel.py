from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict

from travel_calc.core.numbers import js_number, round_half_up, to_fixed
from travel_calc.data.loaders import VehicleTable
from travel_calc.models.vehicle import VehicleProfile


@dataclass
class TripEstimate:
    hours: int
    # 0..60; a fraction rounding up to 60 is not carried into hours.
    minutes: int
    fuel: str
    is_out_of_range: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hours": self.hours,
            "minutes": self.minutes,
            "fuel": self.fuel,
            "isOutOfRange": self.is_out_of_range,
        }


@dataclass
class DurationDistance:
    distance: str
    time: float
    speed: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "distance": self.distance,
            "time": js_number(self.time),
            "speed": js_number(self.speed),
        }


def estimate_trip(distance: float, profile: VehicleProfile) -> TripEstimate:
    """Travel time, fuel and range check for one vehicle over ``distance`` km."""
    time_in_hours = distance / profile.speed
    hours = math.floor(time_in_hours)
    minutes = round_half_up((time_in_hours - hours) * 60)
    fuel_needed = distance / profile.efficiency
    return TripEstimate(
        hours=hours,
        minutes=minutes,
        fuel=to_fixed(fuel_needed, 2),
        is_out_of_range=distance > profile.range,
    )


def compare_all(distance: float, table: VehicleTable) -> Dict[str, Dict[str, Any]]:
    """Run :func:`estimate_trip` for every vehicle, in table order."""
    results: Dict[str, Dict[str, Any]] = {}
    for vehicle_id, profile in table.items():
        estimate = estimate_trip(distance, profile)
        results[vehicle_id] = {
            "name": vehicle_id,
            **estimate.to_dict(),
            "maxRange": js_number(profile.range),
            "speed": js_number(profile.speed),
        }
    return results


def distance_for_duration(time: float, speed: float) -> DurationDistance:
    return DurationDistance(distance=to_fixed(speed * time, 2), time=time, speed=speed)
