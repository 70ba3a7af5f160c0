# Forge Analytics Utilities
from .formatting import format_currency, format_number, format_percent
from .logger import log_call, setup_logging

__all__ = [
    "format_currency",
    "format_number",
    "format_percent",
    "log_call",
    "setup_logging",
]
