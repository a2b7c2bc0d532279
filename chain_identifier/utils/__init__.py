from .logging import setup_logging, get_logger, LogManager, StructuredFormatter

__all__ = [
    'setup_logging',
    'get_logger',
    'LogManager',
    'StructuredFormatter'
]
