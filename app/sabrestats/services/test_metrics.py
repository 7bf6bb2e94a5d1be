import logging

from sabrestats.services.metrics import PollMetrics


def test_counts_outcomes_per_step():
    metrics = PollMetrics()
    metrics.record("fetch", "1", True)
    metrics.record("notify", "1", True)
    metrics.record("notify", "1", False, RuntimeError("down"))

    assert metrics.notify_successes == 1
    assert metrics.count("notify", ok=False) == 1
    assert metrics.snapshot() == {
        "fetch_ok": 1,
        "fetch_failed": 0,
        "store_ok": 0,
        "store_failed": 0,
        "notify_ok": 1,
        "notify_failed": 1,
    }


def test_failures_log_structured_line(caplog):
    metrics = PollMetrics()
    with caplog.at_level(logging.INFO, logger="sabrestats.metrics"):
        metrics.record("store", "42", False, RuntimeError("disk full"))

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "step=store player=42 outcome=failed count=1 error=disk full"
