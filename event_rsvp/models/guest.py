from enum import Enum as PyEnum

from sqlalchemy import Enum, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from event_rsvp.config.table_names import TableNames
from event_rsvp.models.base import Base, TimeStamp


class GuestStatus(str, PyEnum):
    ATTENDING = "attending"
    PENDING = "pending"
    DECLINED = "declined"

    @classmethod
    def from_client(cls, value: str | None) -> "GuestStatus":
        """Map free-form client input onto the stored statuses.

        Only "attending" and "declined" are kept; everything else,
        "maybe" included, becomes pending.
        """
        if value == cls.ATTENDING.value:
            return cls.ATTENDING
        if value == cls.DECLINED.value:
            return cls.DECLINED
        return cls.PENDING


class Guest(Base, TimeStamp):
    __tablename__ = TableNames.GUESTS.value
    __table_args__ = (UniqueConstraint("event_id", "email", name="uq_guests_event_email"),)

    event_id: Mapped[int | None] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.id", ondelete="CASCADE"),
        nullable=True,  # guests added from the admin panel have no event
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    status: Mapped[GuestStatus] = mapped_column(
        Enum(
            GuestStatus,
            name="guest_status_enum",
            native_enum=False,
            length=20,
            values_callable=lambda x: [e.value for e in x],
        ),
        default=GuestStatus.PENDING,
        nullable=False,
    )

    # Only filled in by RSVP submissions
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    plus_ones: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    dietary_restrictions: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Guest {self.name} - {self.status.value}>"
