"""
공통 로거 설정.

print 대신 표준 logging 을 사용해 stdout 으로 내보낸다 (컨테이너 로그 수집용).
"""

import logging
import sys

from .config import settings


def get_logger(name: str) -> logging.Logger:
    """
    모듈 이름으로 로거를 가져온다. 핸들러는 한 번만 붙인다.

    Args:
        name: 보통 __name__

    Returns:
        설정된 logging.Logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(settings.LOG_LEVEL.upper())

        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
