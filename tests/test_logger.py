from __future__ import annotations

import logging

from ircchat.logs.event_catalog import EVENT_TEMPLATES
from ircchat.logs.logger import ClientLogger


def test_logger_template_and_fallback(caplog) -> None:  # type: ignore[no-untyped-def]
    log = ClientLogger("test_logger")
    caplog.set_level(logging.INFO)

    log.log_event("app", "start")
    log.log_event("custom_domain", "custom_action", extra_field=123)

    msgs = [r.message for r in caplog.records]
    assert any("Starting IRC chat client" in m for m in msgs)
    assert any("custom domain: custom action" in m for m in msgs)


def test_logger_prefix_carries_user_and_channel(caplog) -> None:  # type: ignore[no-untyped-def]
    log = ClientLogger("test_logger2")
    caplog.set_level(logging.INFO)

    log.log_event("irc", "channel_changed", user="tester", channel="#python")

    msg = caplog.records[0].message
    assert msg.startswith("[tester#python")
    assert "Current channel is now #python" in msg


def test_logger_debug_includes_event_name_and_context(caplog, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("DEBUG", "1")
    log = ClientLogger("test_logger3")
    caplog.set_level(logging.DEBUG)

    log.log_event("irc", "raw_in", level=logging.DEBUG, raw="PING :x")

    msg = caplog.records[0].message
    assert msg.startswith("irc_raw_in")
    assert len(msg.split("[")[0]) >= 28
    assert "(raw=PING :x)" in msg


def test_logger_skips_disabled_levels(caplog) -> None:  # type: ignore[no-untyped-def]
    log = ClientLogger("test_logger4")
    caplog.set_level(logging.WARNING)

    log.log_event("irc", "raw_in", level=logging.DEBUG, raw="PING :x")

    assert caplog.records == []


def test_template_with_missing_field_falls_back_to_raw_template(caplog) -> None:  # type: ignore[no-untyped-def]
    log = ClientLogger("test_logger5")
    caplog.set_level(logging.INFO)

    log.log_event("irc", "connect_start")

    assert "Connecting to {server}:{port}" in caplog.records[0].message


def test_catalog_is_keyed_by_domain_and_action() -> None:
    assert EVENT_TEMPLATES[("irc", "malformed_line")].startswith("Skipping malformed line")
    assert ("command", "unknown") in EVENT_TEMPLATES
