from .base import Base, BaseModel
from .event import Event
from .guest import Guest, GuestStatus

__all__ = [
    "Base",
    "BaseModel",
    "Event",
    "Guest",
    "GuestStatus",
]
