from event_rsvp.config.settings import settings

EVENTS_URL = f"{settings.api_prefix}/events"
