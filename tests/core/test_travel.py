"""Tests for the travel formulas: pure functions over a VehicleProfile, no IO."""

import math

from travel_calc.core.travel import compare_all, distance_for_duration, estimate_trip
from travel_calc.data.loaders import get_vehicle_table
from travel_calc.models.vehicle import VehicleProfile


THAR = VehicleProfile("thar", speed=155, efficiency=15.2, tank=57, range=866.40)


def test_estimate_trip_beyond_range():
    estimate = estimate_trip(1000, THAR)
    assert estimate.hours == 6
    assert estimate.minutes == 27
    assert estimate.fuel == "65.79"
    assert estimate.is_out_of_range is True


def test_estimate_trip_within_range():
    estimate = estimate_trip(500, THAR)
    assert estimate.hours == 3
    assert estimate.minutes == 14
    assert estimate.fuel == "32.89"
    assert estimate.is_out_of_range is False


def test_distance_equal_to_range_is_not_out_of_range():
    assert estimate_trip(866.40, THAR).is_out_of_range is False


def test_minutes_rounding_to_sixty_is_not_carried():
    alto = VehicleProfile("alto", speed=140, efficiency=22.05, tank=35, range=771.75)
    estimate = estimate_trip(139, alto)  # 0.9929 h
    assert estimate.hours == 0
    assert estimate.minutes == 60


def test_range_is_not_derived_from_tank_and_efficiency():
    # 57 * 15.2 = 866.4, but a stored range of 500 must win.
    short = VehicleProfile("thar", speed=155, efficiency=15.2, tank=57, range=500)
    assert estimate_trip(600, short).is_out_of_range is True


def test_estimate_trip_to_dict_uses_camel_case_flag():
    assert estimate_trip(500, THAR).to_dict() == {
        "hours": 3,
        "minutes": 14,
        "fuel": "32.89",
        "isOutOfRange": False,
    }


def test_compare_all_follows_table_order_and_formula():
    table = get_vehicle_table()
    results = compare_all(500, table)

    assert list(results) == list(table)
    for vehicle_id, entry in results.items():
        profile = table[vehicle_id]
        time_in_hours = 500 / profile.speed
        assert entry["name"] == vehicle_id
        assert entry["hours"] == math.floor(time_in_hours)
        assert entry["fuel"] == f"{500 / profile.efficiency:.2f}"
        assert entry["isOutOfRange"] == (500 > profile.range)
        assert entry["maxRange"] == profile.range
        assert entry["speed"] == profile.speed


def test_compare_all_renders_integral_values_as_ints():
    results = compare_all(100, get_vehicle_table())
    assert results["kiaseltos"]["maxRange"] == 840
    assert isinstance(results["kiaseltos"]["maxRange"], int)
    assert isinstance(results["alto"]["speed"], int)


def test_distance_for_duration():
    result = distance_for_duration(2, 60)
    assert result.to_dict() == {"distance": "120.00", "time": 2, "speed": 60}


def test_distance_for_duration_keeps_fractional_echo():
    result = distance_for_duration(1.5, 33.3).to_dict()
    assert result["distance"] == "49.95"
    assert result["time"] == 1.5
    assert result["speed"] == 33.3
