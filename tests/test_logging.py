import logging

from pharmavault.core.logging import LOG_FORMAT, QUIET_LOGGERS, EventFormatter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("pharmavault", logging.INFO, __file__, 1, "분석 완료", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_fills_missing_event_fields():
    line = EventFormatter(LOG_FORMAT).format(_record())
    assert "event=system component=- stage=-" in line
    assert line.endswith("분석 완료")


def test_formatter_keeps_event_fields():
    record = _record(event="vitals_analyzed", component="vitals", stage="analyze")
    line = EventFormatter(LOG_FORMAT).format(record)
    assert "event=vitals_analyzed component=vitals stage=analyze" in line


def test_configure_logging_quiets_http_client_loggers():
    configure_logging("debug")
    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
