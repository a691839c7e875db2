"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class ServiceStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

    @classmethod
    def parse(cls, raw: str | None) -> "ServiceStatus":
        """Anything Splynx reports other than ``active`` is treated as inactive."""
        if raw and raw.strip().lower() == cls.ACTIVE.value:
            return cls.ACTIVE
        return cls.INACTIVE


class GeocodeStatus(str, Enum):
    OK = "ok"
    NO_RESULT = "no_result"
    AUTH_REJECTED = "auth_rejected"


class FailureReason(str, Enum):
    NO_ADDRESS = "No address available"
    GEOCODING_FAILED = "Geocoding failed"
    UPDATE_FAILED = "Update failed"
