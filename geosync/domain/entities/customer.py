"""Customer entity — a Splynx customer account (read-only here)."""

from dataclasses import dataclass


@dataclass
class Customer:
    id: int
    name: str | None
    login: str | None = None
    street_1: str | None = None
    city: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or "N/A"
