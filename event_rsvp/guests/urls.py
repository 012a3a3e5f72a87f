from event_rsvp.config.settings import settings

GUESTS_URL = f"{settings.api_prefix}/guests"
GUEST_URL = f"{settings.api_prefix}/guests/{{guest_id}}"
SUBMIT_RSVP_URL = f"{settings.api_prefix}/events/{{event_id}}/rsvps"
