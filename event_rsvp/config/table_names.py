from enum import Enum


class TableNames(str, Enum):
    EVENTS = "events"
    GUESTS = "guests"
