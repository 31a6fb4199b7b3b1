"""
Structured Logging Configuration

Console output for the calculator service, an optional plain-text log file,
and the ``medcalc.audit`` channel that carries audit-entry echoes.

The audit channel is levelled on its own: with ``AUDIT_ECHO`` enabled its
DEBUG echoes are emitted even when the service runs at INFO.
"""
import logging
import sys
from typing import Optional
from datetime import datetime, timezone

from medcalc.config import AUDIT_ECHO, LOG_LEVEL, LOG_FILE

AUDIT_LOGGER_NAME = "medcalc.audit"


class StructuredFormatter(logging.Formatter):
    """[timestamp] LEVEL [logger] message, coloured by level."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m'
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).isoformat()
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        channel = "AUDIT" if record.name == AUDIT_LOGGER_NAME else record.name
        log_message = (
            f"{color}[{timestamp}] {record.levelname:8} [{channel}] "
            f"{record.getMessage()}{reset}"
        )
        if record.exc_info:
            log_message += f"\n{self.formatException(record.exc_info)}"
        return log_message


def configure_audit_logger(echo: bool) -> logging.Logger:
    """
    Level the audit channel: DEBUG when entries are echoed, otherwise it
    follows the root logger.
    """
    audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)
    audit_logger.setLevel(logging.DEBUG if echo else logging.NOTSET)
    return audit_logger


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    audit_echo: bool = False,
) -> None:
    """
    Configure service-wide logging.

    Args:
        level: Root logging level name; unknown names fall back to INFO
        log_file: Optional file path for log output
        audit_echo: Emit each audit entry on the ``medcalc.audit`` channel
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    # Handlers pass everything; loggers decide what is emitted.
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
        ))
        root_logger.addHandler(file_handler)

    configure_audit_logger(audit_echo)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_audit_logger() -> logging.Logger:
    return logging.getLogger(AUDIT_LOGGER_NAME)


setup_logging(LOG_LEVEL, LOG_FILE or None, AUDIT_ECHO)
