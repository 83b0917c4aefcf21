"""Request logging — one record before and one after each request."""

import logging

LOGGER = "student_records.infrastructure.request_logging"


def _records(caplog):
    return [r for r in caplog.records if r.name == LOGGER]


async def test_logs_start_and_completion(client, caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)
    await client.get("/api/students")

    started, completed = _records(caplog)
    assert started.method == "GET"
    assert started.path == "/api/students"
    assert completed.status_code == 200
    assert completed.elapsed_ms >= 0


async def test_logs_error_status(client, caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)
    await client.get("/api/students/999")

    completed = _records(caplog)[-1]
    assert completed.status_code == 404
    assert completed.path == "/api/students/999"
