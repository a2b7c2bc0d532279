import logging
import json
import sys
import threading
from typing import Optional, Dict, Any
from enum import Enum
from datetime import datetime

class LogLevel(Enum):
    """Log levels enumeration"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

class LogFormat(Enum):
    """Log format types"""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"

class StructuredFormatter(logging.Formatter):
    """Structured log formatter"""

    def __init__(self, fmt_type: LogFormat = LogFormat.DETAILED):
        self.fmt_type = fmt_type
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        if self.fmt_type == LogFormat.JSON:
            return self._format_json(record)
        elif self.fmt_type == LogFormat.SIMPLE:
            return self._format_simple(record)
        else:
            return self._format_text(record)

    def _format_json(self, record: logging.LogRecord) -> str:
        """Format as JSON"""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)

    def _format_simple(self, record: logging.LogRecord) -> str:
        msg = f"{record.levelname}: {record.getMessage()}"
        if record.exc_info:
            msg += f"\n{self.formatException(record.exc_info)}"
        return msg

    def _format_text(self, record: logging.LogRecord) -> str:
        """Format as detailed text"""
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]

        base_msg = f"{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}"

        if record.exc_info:
            base_msg += f"\n{self.formatException(record.exc_info)}"

        return base_msg

class LogManager:
    """Process-wide logging setup for the identifier"""

    _instance = None
    _lock = threading.Lock()

    ROOT_LOGGER = "chain_identifier"

    def __new__(cls):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._initialized = False
            return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.handlers = []
        self.config = {
            'log_level': LogLevel.WARNING,
            'log_format': LogFormat.SIMPLE,
            'log_file': None,
            'enable_console': True,
        }

        self._initialized = True

    def configure(self, config: Dict[str, Any]) -> None:
        """Configure logging for the package logger hierarchy"""
        self.config.update(config)
        self._setup_logging_system()

    def _setup_logging_system(self) -> None:
        logger = logging.getLogger(self.ROOT_LOGGER)
        for handler in self.handlers:
            logger.removeHandler(handler)
            handler.close()
        self.handlers = []

        logger.setLevel(getattr(logging, self.config['log_level'].value))
        formatter = StructuredFormatter(self.config['log_format'])

        if self.config['enable_console']:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.handlers.append(console_handler)

        if self.config.get('log_file'):
            file_handler = logging.FileHandler(self.config['log_file'], encoding='utf-8')
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        for handler in self.handlers:
            logger.addHandler(handler)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)

def setup_logging(log_level: str = "WARNING", log_format: str = "simple",
                  log_file: Optional[str] = None) -> None:
    """Configure package logging from plain strings"""
    config = {
        'log_level': LogLevel(log_level.upper()),
        'log_format': LogFormat(log_format.lower()),
        'log_file': log_file,
    }

    LogManager().configure(config)

def get_logger(name: str) -> logging.Logger:
    return LogManager().get_logger(name)
