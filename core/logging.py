"""
로깅 설정 유틸리티

클라이언트를 사용하는 프로세스의 공통 로깅 설정.
- 콘솔: INFO 레벨
- 파일: INFO 레벨 (TimedRotatingFileHandler, daily)
- 모든 핸들러에 SensitiveDataFilter 적용 (서명/API 키 마스킹)

라이브러리 모듈은 logging.getLogger(__name__)만 사용하고
핸들러 구성은 이 함수를 호출하는 애플리케이션이 담당.

사용법:
    from core.logging import setup_logging
    setup_logging("binance")
"""

import logging
import re
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7

# 레벨을 WARNING으로 올릴 서드파티 로거
NOISY_LOGGERS = [
    "httpcore",
    "httpx",          # 요청 URL 로그에 서명 쿼리스트링이 포함됨
    "asyncio",
]

REDACTED = "***"

# signature=<hex>, X-MBX-APIKEY: <key> 형태 마스킹
_SENSITIVE_PATTERNS = [
    re.compile(r"(signature=)[0-9a-fA-F]+"),
    re.compile(r"((?:'|\")?X-MBX-APIKEY(?:'|\")?\s*[:=]\s*(?:'|\")?)[^'\",\s}]+", re.IGNORECASE),
]


def redact(text: str) -> str:
    """문자열에서 서명/API 키 값 마스킹"""
    for pattern in _SENSITIVE_PATTERNS:
        text = pattern.sub(rf"\g<1>{REDACTED}", text)
    return text


class SensitiveDataFilter(logging.Filter):
    """로그 레코드의 서명/API 키 마스킹

    서드파티 로거(httpx 등)를 DEBUG로 켠 경우에도
    파일/콘솔에 자격 증명이 남지 않도록 핸들러 단에서 적용.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(
    process_name: str = "binance",
    console_level: int = logging.INFO,
    file_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """로깅 설정 초기화

    Daily 롤링으로 매일 자정에 새 파일 생성.
    여러 번 호출해도 핸들러는 콘솔 1개 + 파일 1개만 유지.

    Args:
        process_name: 프로세스 이름 (로그 파일명)
        console_level: 콘솔 로그 레벨 (기본: INFO)
        file_level: 파일 로그 레벨 (기본: INFO)
        log_dir: 로그 디렉토리 (None이면 Paths.LOGS_DIR)

    Returns:
        설정된 루트 Logger
    """
    log_file = get_log_file_path(process_name, log_dir)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # 필터링은 핸들러 레벨에서

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    sensitive_filter = SensitiveDataFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.suffix = "%Y-%m-%d"  # binance.log.2026-02-21
    file_handler.setLevel(file_level)

    for handler in (console_handler, file_handler):
        handler.setFormatter(formatter)
        handler.addFilter(sensitive_filter)
        root_logger.addHandler(handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(
        f"로깅 초기화 완료: {process_name} "
        f"(console={logging.getLevelName(console_level)}, "
        f"file={log_file}, level={logging.getLevelName(file_level)})"
    )

    return root_logger


def get_log_file_path(process_name: str, log_dir: Path | None = None) -> Path:
    """로그 파일 경로 반환"""
    return (log_dir or Paths.LOGS_DIR) / f"{process_name}.log"
