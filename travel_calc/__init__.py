from .core.travel import compare_all, distance_for_duration, estimate_trip
from .data.loaders import load_vehicle_table

__all__ = ['estimate_trip', 'compare_all', 'distance_for_duration', 'load_vehicle_table']
