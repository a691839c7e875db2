"""GeoPoint value object — immutable (lat, lon) pair."""

from dataclasses import dataclass
from decimal import Decimal


def _plain_decimal(value: float) -> str:
    # Shortest round-trip digits, never scientific notation (-5e-05 → -0.00005).
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def to_marker(self) -> str:
        """Encode as the Splynx ``geo.marker`` string, e.g. ``"-41.28,174.77"``."""
        return f"{_plain_decimal(self.latitude)},{_plain_decimal(self.longitude)}"
