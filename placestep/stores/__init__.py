from .selection import SelectionStore
from .trip_context import GeoPoint, TripContext, TripContextStore

__all__ = ["GeoPoint", "SelectionStore", "TripContext", "TripContextStore"]
