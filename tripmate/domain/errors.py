"""
Tripmate Error Codes

Closed set of business error codes returned by use cases and gates.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error kinds surfaced by the identity and authorization layers"""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMAIL_CONFLICT = "EMAIL_CONFLICT"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    # Kept distinct from INVALID_CREDENTIALS on purpose: a pending account is
    # told to verify its email, at the cost of revealing that it exists.
    USER_NOT_ACTIVE = "USER_NOT_ACTIVE"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    SCHEDULE_NOT_FOUND = "SCHEDULE_NOT_FOUND"
    SHARE_LINK_NOT_FOUND = "SHARE_LINK_NOT_FOUND"
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"
    FORBIDDEN = "FORBIDDEN"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    SHARE_LINK_CONFLICT = "SHARE_LINK_CONFLICT"
    EMAIL_DELIVERY_FAILED = "EMAIL_DELIVERY_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def is_not_found(self) -> bool:
        return self in _NOT_FOUND

    @property
    def is_internal(self) -> bool:
        return self in _INTERNAL


_NOT_FOUND = frozenset(
    {
        ErrorCode.USER_NOT_FOUND,
        ErrorCode.TRIP_NOT_FOUND,
        ErrorCode.SCHEDULE_NOT_FOUND,
        ErrorCode.SHARE_LINK_NOT_FOUND,
    }
)

_INTERNAL = frozenset({ErrorCode.EMAIL_DELIVERY_FAILED, ErrorCode.INTERNAL_ERROR})
