"""
Trip Use Cases

Trip CRUD behind the ownership and share-link gates.
"""

from .create_trip_use_case import CreateTripUseCase
from .list_trips_use_case import ListTripsUseCase
from .update_trip_use_case import UpdateTripUseCase
from .delete_trip_use_case import DeleteTripUseCase
from .get_trip_use_case import GetTripUseCase
from .get_trip_details_use_case import GetTripDetailsUseCase
from .dtos import MemberResponse, TripCommand, TripResponse, TripDetailsResponse

__all__ = [
    "CreateTripUseCase",
    "ListTripsUseCase",
    "UpdateTripUseCase",
    "DeleteTripUseCase",
    "GetTripUseCase",
    "GetTripDetailsUseCase",
    "MemberResponse",
    "TripCommand",
    "TripResponse",
    "TripDetailsResponse",
]
