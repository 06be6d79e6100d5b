"""
Logging Configuration

Sets up Python logging with rotating file handler for the application.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_log_dir() -> Path:
    """Default log directory (~/.config/kbheight/logs)"""
    return Path.home() / ".config" / "kbheight" / "logs"


def parse_log_level(level: Union[int, str]) -> int:
    """
    Convert a level name such as "DEBUG" to its logging constant.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(log_dir: Path = None, log_level: Union[int, str] = logging.INFO):
    """
    Set up application-wide logging with rotating file handler.
    
    Args:
        log_dir: Directory for log files (defaults to ~/.config/kbheight/logs)
        log_level: Logging level or level name (default: INFO)
    """
    if log_dir is None:
        log_dir = get_log_dir()
    log_level = parse_log_level(log_level)
    
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "kbheight.log"
    
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    
    # 10MB max, keep 5 backup files
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    
    # Only warnings and errors to console
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    
    logging.getLogger('PyQt6').setLevel(logging.WARNING)
    
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.
    
    Args:
        name: Logger name (usually __name__)
        
    Returns:
        Logger instance
    """
    return logging.getLogger(name)
