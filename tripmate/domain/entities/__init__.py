"""
Tripmate Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .user import User
from .trip import Trip
from .schedule import Schedule
from .share_link import ShareLink
from .trip_member import TripMember

__all__ = [
    "User",
    "Trip",
    "Schedule",
    "ShareLink",
    "TripMember",
]
