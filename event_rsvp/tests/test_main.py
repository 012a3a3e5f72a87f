import logging

from event_rsvp import main
from event_rsvp.config.logging import setup_logging


def test_run_does_not_reload_by_default(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main.run()

    assert calls == [
        (
            "event_rsvp.main:app",
            {"host": main.settings.app_host, "port": main.settings.app_port, "reload": False},
        )
    ]


def test_setup_logging_quiets_driver_chatter():
    setup_logging()

    assert logging.getLogger("aiosqlite").level >= logging.INFO
    assert logging.getLogger("httpx").level >= logging.INFO
