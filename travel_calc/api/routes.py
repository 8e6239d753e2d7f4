from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from travel_calc.api.dependencies import vehicle_table
from travel_calc.core.errors import InvalidParameterError
from travel_calc.core.numbers import is_truthy, js_number, parse_float
from travel_calc.core.travel import compare_all, distance_for_duration, estimate_trip
from travel_calc.data.loaders import VehicleTable


class TripResponse(BaseModel):
    hours: int
    minutes: int
    fuel: str
    isOutOfRange: bool


class VehicleComparison(BaseModel):
    name: str
    hours: int
    minutes: int
    fuel: str
    isOutOfRange: bool
    maxRange: Union[int, float]
    speed: Union[int, float]


class DurationResponse(BaseModel):
    distance: str
    time: Union[int, float]
    speed: Union[int, float]


router = APIRouter()


def _query_value(values: Optional[List[str]]) -> Optional[str]:
    # A repeated parameter reads as its values joined with commas,
    # so ?distance=1&distance=2 parses as 1 and ?vehicle=a&vehicle=b matches no vehicle.
    if values is None:
        return None
    return ",".join(values)


@router.get("/calculate", response_model=TripResponse)
def calculate(
    distance: Optional[List[str]] = Query(None),
    vehicle: Optional[List[str]] = Query(None),
    table: VehicleTable = Depends(vehicle_table),
) -> Dict[str, Any]:
    """Travel time, fuel and range check for one vehicle."""
    km = parse_float(_query_value(distance))
    vehicle_id = _query_value(vehicle)
    if math.isnan(km) or km <= 0 or not vehicle_id:
        raise InvalidParameterError("Missing parameters")

    profile = table.get(vehicle_id)
    if profile is None:
        raise InvalidParameterError("Invalid vehicle")

    return estimate_trip(km, profile).to_dict()


@router.get("/compare-all", response_model=Dict[str, VehicleComparison])
def compare_all_vehicles(
    distance: Optional[List[str]] = Query(None),
    table: VehicleTable = Depends(vehicle_table),
) -> Dict[str, Dict[str, Any]]:
    km = parse_float(_query_value(distance))
    if not is_truthy(km):
        raise InvalidParameterError("Distance is required")
    return compare_all(km, table)


@router.get("/calculate-duration", response_model=DurationResponse)
def calculate_duration(
    time: Optional[List[str]] = Query(None),
    speed: Optional[List[str]] = Query(None),
) -> Dict[str, Any]:
    """Distance covered at ``speed`` km/h over ``time`` hours."""
    hours = parse_float(_query_value(time))
    kmh = parse_float(_query_value(speed))
    if math.isnan(hours) or math.isnan(kmh):
        raise InvalidParameterError("Please provide valid time and speed values")
    return distance_for_duration(hours, kmh).to_dict()


@router.get("/vehicles")
def list_vehicles(table: VehicleTable = Depends(vehicle_table)) -> Dict[str, Dict[str, Any]]:
    return {
        vehicle_id: {key: js_number(value) for key, value in profile.to_dict().items()}
        for vehicle_id, profile in table.items()
    }


@router.get("/vehicle-speeds")
def vehicle_speeds(table: VehicleTable = Depends(vehicle_table)) -> Dict[str, Any]:
    return {vehicle_id: js_number(profile.speed) for vehicle_id, profile in table.items()}
