from event_rsvp.routers.healthz import router as healthz

__all__ = [
    "healthz",
]
