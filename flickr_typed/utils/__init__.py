"""Utils package initialization."""

from .ui import setup_logging, get_logger, print_and_log

__all__ = ['setup_logging', 'get_logger', 'print_and_log']
