"""CLI commands for event and guest management."""

import asyncio

import typer

from event_rsvp.errors import StorageError
from event_rsvp.events.repository.read_models import SqlEventReadModel
from event_rsvp.events.repository.write_models import SqlEventWriteModel
from event_rsvp.guests.repository.filters import GuestFilter
from event_rsvp.guests.repository.read_models import SqlGuestReadModel
from event_rsvp.validation import TIMESTAMP_EXAMPLE, blank_to_none, format_timestamp, parse_timestamp

app = typer.Typer(help="CLI commands for event and guest management")


@app.command()
def create_event(
    title: str = typer.Argument(..., help="Event title"),
    date: str = typer.Option(
        ...,
        "--date",
        "-d",
        help=f"Event start as an ISO 8601 timestamp, e.g. {TIMESTAMP_EXAMPLE}",
    ),
    description: str = typer.Option(
        None,
        "--description",
        help="Optional description",
    ),
    location: str = typer.Option(
        None,
        "--location",
        "-l",
        help="Optional location",
    ),
):
    """Create a new event."""
    title = blank_to_none(title)
    if title is None:
        typer.secho("Title is required", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        event_date = parse_timestamp(date)
    except ValueError:
        typer.secho(f"Invalid date, use ISO 8601 (e.g., {TIMESTAMP_EXAMPLE})", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        event = asyncio.run(
            SqlEventWriteModel().create_event(
                title=title,
                event_date=event_date,
                description=blank_to_none(description),
                location=blank_to_none(location),
            )
        )
    except StorageError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.secho("Event created!", fg=typer.colors.GREEN)
    typer.secho(f"  ID: {event.id}", fg=typer.colors.CYAN)
    typer.secho(f"  {event.display}", fg=typer.colors.BLUE)


@app.command()
def list_events():
    """List all events with their RSVP counts."""
    events = asyncio.run(SqlEventReadModel().list_events())
    if not events:
        typer.secho("No events yet.", fg=typer.colors.YELLOW)
        return

    for event in events:
        typer.secho(f"[{event.id}] {event.display}", fg=typer.colors.BLUE)
        typer.echo(f"  RSVPs: {event.rsvps}")


@app.command()
def list_guests(
    status: str = typer.Option(
        None,
        "--status",
        "-s",
        help="Only guests with this status (attending, pending, declined)",
    ),
    search: str = typer.Option(
        None,
        "--search",
        "-q",
        help="Case-insensitive match on name or email",
    ),
):
    """List guests, optionally filtered."""
    guests = asyncio.run(SqlGuestReadModel().list_guests(GuestFilter(status=status, search=search)))
    if not guests:
        typer.secho("No guests found.", fg=typer.colors.YELLOW)
        return

    for guest in guests:
        created = format_timestamp(guest.created_at) if guest.created_at else "-"
        typer.secho(f"[{guest.id}] {guest.name} <{guest.email}>", fg=typer.colors.BLUE)
        typer.echo(f"  Status: {guest.status.value}  Event: {guest.event_id or '-'}  Added: {created}")


if __name__ == "__main__":
    app()
