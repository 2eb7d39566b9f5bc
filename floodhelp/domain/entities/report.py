"""Report entity — a flood victim's request for help, reviewed by a field worker."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from floodhelp.domain.errors import InvalidInput
from floodhelp.domain.value_objects.enums import ReportStatus, UrgencyLevel
from floodhelp.domain.value_objects.geo_point import GeoPoint


@dataclass
class Report:
    name: str
    raw_message: str
    id: UUID | None = None
    lastname: str | None = None
    address: str | None = None
    location: GeoPoint | None = None
    phone: list[str] = field(default_factory=list)
    number_of_adults: int = 0
    number_of_children: int = 0
    number_of_seniors: int = 0
    health_condition: str | None = None
    help_needed: str | None = None
    urgency_level: UrgencyLevel = UrgencyLevel.WARNING
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> None:
        """Raise InvalidInput if the report cannot be stored."""
        if not self.name or not self.name.strip():
            raise InvalidInput("name is required")
        if not self.raw_message or not self.raw_message.strip():
            raise InvalidInput("raw_message is required")
        if self.urgency_level not in set(UrgencyLevel):
            raise InvalidInput(f"urgency_level must be 1-5, got {self.urgency_level}")
        for label, count in (
            ("number_of_adults", self.number_of_adults),
            ("number_of_children", self.number_of_children),
            ("number_of_seniors", self.number_of_seniors),
        ):
            if count < 0:
                raise InvalidInput(f"{label} must not be negative")

    def has_location(self) -> bool:
        return self.location is not None

    def needs_geocoding(self) -> bool:
        return not self.has_location() and bool(self.address and self.address.strip())

    def is_critical(self) -> bool:
        return self.urgency_level >= UrgencyLevel.VULNERABLE

    def total_people(self) -> int:
        return self.number_of_adults + self.number_of_children + self.number_of_seniors


def parse_phone_numbers(raw: str | list[str] | None) -> list[str]:
    """Split a comma-separated phone string (as typed on the review form).

    Lists are cleaned the same way; blanks are dropped.
    """
    if not raw:
        return []
    parts = raw.split(",") if isinstance(raw, str) else raw
    return [p.strip() for p in parts if p and p.strip()]
