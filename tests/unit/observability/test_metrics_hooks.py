import logging

import pytest

from force_tracker.observability import LoggingMetricsHook, NoOpMetricsHook


def test_noop_hook_accepts_everything() -> None:
    hook = NoOpMetricsHook()

    hook.record_latency("x", 1.0)
    hook.increment("y", 2, labels={"a": "b"})
    hook.record_gauge("z", 3.0)


def test_logging_hook_writes_metrics(caplog: pytest.LogCaptureFixture) -> None:
    hook = LoggingMetricsHook(level=logging.INFO)

    with caplog.at_level(logging.INFO, logger="force_tracker.observability"):
        hook.increment("quiz_fallbacks_total", labels={"kind": "course"})
        hook.record_latency("analysis_duration", 12.5)

    assert "counter quiz_fallbacks_total+=1 labels={'kind': 'course'}" in caplog.text
    assert "latency analysis_duration=12.5ms labels={}" in caplog.text
