import logging

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s "
    "event=%(event)s component=%(component)s stage=%(stage)s %(message)s"
)
EXTRA_DEFAULTS = {"event": "system", "component": "-", "stage": "-"}
# httpx는 요청 URL(API 키 쿼리 포함)을 INFO로 남긴다
QUIET_LOGGERS = ("httpx", "httpcore")


class EventFormatter(logging.Formatter):
    """log_event 확장 필드가 없는 레코드도 포맷할 수 있는 포매터"""

    def format(self, record: logging.LogRecord) -> str:
        for field, default in EXTRA_DEFAULTS.items():
            if not hasattr(record, field):
                setattr(record, field, default)
        return super().format(record)


def configure_logging(level: str) -> None:
    """애플리케이션 로깅을 설정

    Args:
        level: 로깅 레벨 문자열
    """
    handler = logging.StreamHandler()
    handler.setFormatter(EventFormatter(LOG_FORMAT))
    logging.basicConfig(level=level.upper(), handlers=[handler])

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
