"""
Utility modules for the hand tracking application.
"""

from .arg_parser import parse_args
from .timing_utils import FPSCounter, Timer
from .debug_logger import configure_logging, log_performance

__all__ = [
    'parse_args',
    'FPSCounter',
    'Timer',
    'configure_logging',
    'log_performance',
]
