"""
Custom Exceptions for the booking backend

This module defines the exception hierarchy raised by services and
translated into JSON error responses by the API layer.
"""

from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"

    # Business logic errors
    BOOKING_CONFLICT = "BOOKING_CONFLICT"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Validation Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 422
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)


class InvalidDateRangeError(ValidationError):
    """Exception raised when an end date does not fall after its start date"""

    def __init__(
        self,
        start_date: Optional[date],
        end_date: Optional[date],
        message: Optional[str] = None,
    ):
        if not message:
            message = "End date must be after start date"
        super().__init__(message, error_code=ErrorCode.INVALID_DATE_RANGE)
        self.details = {
            "start_date": start_date.isoformat() if start_date else None,
            "end_date": end_date.isoformat() if end_date else None,
        }


# ========================================
# Not Found Exceptions
# ========================================

class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class RoomNotFoundError(ResourceNotFoundError):
    def __init__(self, room_id: Optional[str] = None):
        super().__init__("Room", room_id)


class BookingNotFoundError(ResourceNotFoundError):
    def __init__(self, booking_id: Optional[str] = None):
        super().__init__("Booking", booking_id)


class TouristNotFoundError(ResourceNotFoundError):
    def __init__(self, tourist_id: Optional[str] = None):
        super().__init__("Tourist", tourist_id)


class BusinessNotFoundError(ResourceNotFoundError):
    def __init__(self, business_id: Optional[str] = None):
        super().__init__("Business", business_id)


class SeasonalPricingNotFoundError(ResourceNotFoundError):
    def __init__(self, pricing_id: Optional[str] = None):
        super().__init__("Seasonal pricing", pricing_id)


class BlockedDateNotFoundError(ResourceNotFoundError):
    def __init__(self, blocked_date_id: Optional[str] = None):
        super().__init__("Blocked date", blocked_date_id)


# ========================================
# Booking Exceptions
# ========================================

class BookingConflictError(BaseAppException):
    """
    Exception raised when the requested stay overlaps an active booking
    or a blocked range on the same room.
    """

    def __init__(
        self,
        message: str = "Room is not available for the selected dates",
        conflicts: Optional[List[Dict[str, Any]]] = None,
        room_id: Optional[str] = None,
    ):
        details: Dict[str, Any] = {"conflicts": conflicts or []}
        if room_id:
            details["room_id"] = room_id
        super().__init__(message, ErrorCode.BOOKING_CONFLICT, details, 409)


class InvalidStateTransitionError(BaseAppException):
    """Exception raised when a booking status cannot move to the requested one"""

    def __init__(self, current_status: str, requested_status: str, message: Optional[str] = None):
        if not message:
            message = f"Cannot change booking status from {current_status} to {requested_status}"
        details = {
            "current_status": current_status,
            "requested_status": requested_status,
        }
        super().__init__(message, ErrorCode.INVALID_STATE_TRANSITION, details, 409)


# ========================================
# Database Exceptions
# ========================================

class DatabaseError(BaseAppException):
    """Exception raised for unexpected persistence failures"""

    def __init__(
        self,
        message: str = "Database operation failed",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.DATABASE_ERROR, details, 500)


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "ValidationError",
    "InvalidDateRangeError",
    "ResourceNotFoundError",
    "RoomNotFoundError",
    "BookingNotFoundError",
    "TouristNotFoundError",
    "BusinessNotFoundError",
    "SeasonalPricingNotFoundError",
    "BlockedDateNotFoundError",
    "BookingConflictError",
    "InvalidStateTransitionError",
    "DatabaseError",
]
