from dataclasses import dataclass
from datetime import datetime

from event_rsvp.validation import as_utc, truncate

DISPLAY_SEPARATOR = " – "
DISPLAY_DATE_FORMAT = "%d %b %y"


def build_display(
    title: str,
    description: str | None = None,
    location: str | None = None,
    event_date: datetime | None = None,
) -> str:
    """Compose the one-line summary shown in event dropdowns.

    Empty parts are left out instead of producing doubled separators.
    """
    parts = [
        truncate(title, 30),
        truncate(description or "", 50),
        truncate(location or "", 30),
        as_utc(event_date).strftime(DISPLAY_DATE_FORMAT) if event_date else "",
    ]
    return DISPLAY_SEPARATOR.join(part for part in parts if part)


@dataclass(frozen=True)
class EventDTO:
    """DTO for event data."""

    id: int
    title: str
    description: str | None = None
    event_date: datetime | None = None
    location: str | None = None
    created_at: datetime | None = None
    rsvps: int = 0

    @property
    def display(self) -> str:
        return build_display(self.title, self.description, self.location, self.event_date)
