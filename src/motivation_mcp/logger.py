import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

import colorlog


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the centralised logging settings.

    Console output goes to stderr; stdout is reserved for the MCP stdio transport.

    Args:
        level: Log level name, defaults to MOTIVATION_LOG_LEVEL or INFO
        log_file: Optional path for a rotating log file, defaults to MOTIVATION_LOG_FILE
    """
    log_level = (level or os.getenv('MOTIVATION_LOG_LEVEL', 'INFO')).upper()
    log_file = log_file or os.getenv('MOTIVATION_LOG_FILE')
    max_bytes = int(os.getenv('LOG_FILE_MAX_BYTES', '10485760'))  # 10 MB
    backup_count = int(os.getenv('LOG_FILE_BACKUP_COUNT', '5'))

    logger = logging.getLogger()
    logger.setLevel(log_level)

    if not logger.hasHandlers():
        console_handler = logging.StreamHandler(sys.stderr)
        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)s:%(name)s:%(message)s",
            log_colors={
                'DEBUG': 'bold_blue',
                'INFO': 'bold_green',
                'WARNING': 'bold_yellow',
                'ERROR': 'bold_red',
                'CRITICAL': 'bold_purple'
            }
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s - (%(filename)s:%(lineno)d)'
            )
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)
