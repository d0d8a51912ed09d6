# checklist_api/core/log_config.py

"""
애플리케이션 로깅 설정 모듈입니다.

애플리케이션 시작 시(lifespan) 한 번 호출되어 루트 로거에 스트림 핸들러를 설치합니다.
각 모듈은 `logger = logging.getLogger(__name__)` 형태로 로거를 생성해 사용합니다.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_HANDLER_NAME = "checklist_api"


def setup_logging(level: str = "INFO") -> None:
    """루트 로거를 설정합니다. 여러 번 호출해도 핸들러는 하나만 유지됩니다."""
    root = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
