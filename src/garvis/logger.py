"""
Logging Utilities

개발 환경은 콘솔 포맷, 운영 환경은 JSON 포맷으로 로그를 남깁니다.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from .config import Settings

LOG_DIR = Path("logs")

# LogRecord 기본 속성 (extra 필드 추출 시 제외)
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, environment: str = "production"):
        super().__init__()
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": "garvis",
            "environment": self.environment,
        }
        log_data.update(_extra_fields(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Console formatter: 기본 포맷 뒤에 extra 필드를 덧붙입니다."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)-7s [%(name)s] %(message)s", "%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extra_fields(record)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return line


def setup_logging(settings: Settings) -> logging.Logger:
    """
    garvis 로거 설정

    여러 번 호출해도 이전에 설치한 핸들러를 교체합니다.

    Returns:
        "garvis" 루트 로거
    """
    logger = logging.getLogger("garvis")
    logger.setLevel(settings.log_level.upper())
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = []
    console = logging.StreamHandler()

    if settings.is_development:
        console.setFormatter(ConsoleFormatter())
        handlers.append(console)
    else:
        formatter = JSONFormatter(settings.app_env)
        console.setFormatter(formatter)
        handlers.append(console)

        LOG_DIR.mkdir(parents=True, exist_ok=True)
        error_file = logging.FileHandler(LOG_DIR / "error.log", encoding="utf-8")
        error_file.setLevel(logging.ERROR)
        error_file.setFormatter(formatter)
        combined_file = logging.FileHandler(LOG_DIR / "combined.log", encoding="utf-8")
        combined_file.setFormatter(formatter)
        handlers.extend([error_file, combined_file])

    for handler in handlers:
        logger.addHandler(handler)

    return logger
