"""
Locations domain package.

Public API:
- Domain models: Point, LocationRecord
- Store + loader: LocationStore, load_location_store
"""
from .models import Point, LocationRecord
from .store import LocationStore, LocationDataError, load_location_store

__all__ = ["Point",
           "LocationRecord",
             "LocationStore",
               "LocationDataError",
               "load_location_store",
               ]
