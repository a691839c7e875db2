"""RunSummary — counters and per-service outcomes of one sync pass."""

from dataclasses import dataclass, field


@dataclass
class ServiceOutcome:
    customer_id: int
    customer_name: str
    service_id: int
    address: str | None = None
    coordinates: str | None = None
    reason: str | None = None


@dataclass
class RunSummary:
    processed: int = 0
    updated: int = 0
    skipped: int = 0
    customers_seen: int = 0
    updated_services: list[ServiceOutcome] = field(default_factory=list)
    failed_services: list[ServiceOutcome] = field(default_factory=list)
    aborted: bool = False
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> int:
        return len(self.failed_services)
