"""Create events and guests tables.

Revision ID: 1f0c2a7d9b31
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "1f0c2a7d9b31"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create events and guests, one RSVP per event and email."""
    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("event_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("location", sa.String(500), nullable=True),
    )

    op.create_table(
        "guests",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            "event_id",
            sa.Integer(),
            sa.ForeignKey("events.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("plus_ones", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dietary_restrictions", sa.Text(), nullable=True),
        sa.UniqueConstraint("event_id", "email", name="uq_guests_event_email"),
        sa.CheckConstraint(
            "status IN ('attending', 'pending', 'declined')", name="ck_guests_status"
        ),
    )
    op.create_index("ix_guests_event_id", "guests", ["event_id"])
    op.create_index("ix_guests_name", "guests", ["name"])
    op.create_index("ix_guests_email", "guests", ["email"])


def downgrade() -> None:
    """Drop guests and events."""
    op.drop_index("ix_guests_email", table_name="guests")
    op.drop_index("ix_guests_name", table_name="guests")
    op.drop_index("ix_guests_event_id", table_name="guests")
    op.drop_table("guests")
    op.drop_table("events")
