"""Composable predicates for the guest search endpoint."""

from dataclasses import dataclass

from sqlalchemy import ColumnElement, Select, or_

from event_rsvp.models import Guest


@dataclass(frozen=True)
class GuestFilter:
    """Optional status and free-text filters.

    Predicates are collected in application order and AND-ed together;
    SQLAlchemy numbers the bind parameters from their position in the
    compiled statement.
    """

    status: str | None = None
    search: str | None = None

    def clauses(self) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if self.status:
            clauses.append(Guest.status == self.status)
        if self.search:
            term = f"%{self.search}%"
            clauses.append(or_(Guest.name.ilike(term), Guest.email.ilike(term)))
        return clauses

    def apply(self, stmt: Select) -> Select:
        clauses = self.clauses()
        if not clauses:
            return stmt
        return stmt.where(*clauses)
