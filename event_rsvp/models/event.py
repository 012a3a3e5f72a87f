from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from event_rsvp.config.table_names import TableNames
from event_rsvp.models.base import Base, TimeStamp


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    event_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    location: Mapped[str | None] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<Event {self.title} on {self.event_date}>"
