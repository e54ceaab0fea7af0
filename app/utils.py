import logging
import os
import re

from constants import HEX_COLOR_PATTERN


# Custom logging formatter to support colors
class ColoredFormatter(logging.Formatter):
    # Define color codes
    COLORS = {
        'DEBUG': '\033[94m',   # Blue
        'INFO': '\033[92m',    # Green
        'WARNING': '\033[93m', # Yellow
        'ERROR': '\033[91m',   # Red
        'CRITICAL': '\033[95m' # Magenta
    }
    RESET = '\033[0m'  # Reset color

    def format(self, record):
        # Add color to the log level name
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        return super().format(record)


# Filter to remove date from http access logs
class FilterRemoveDateFromWerkzeugLogs(logging.Filter):
    # '192.168.0.102 - - [30/Jun/2024 01:14:03] "%s" %s %s' -> '192.168.0.102 - "%s" %s %s'
    pattern: re.Pattern = re.compile(r' - - \[.+?] "')

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self.pattern.sub(' - "', record.msg)
        return True


_hex_color_re = re.compile(HEX_COLOR_PATTERN)


def is_hex_color(color):
    """True for strings of the form #RRGGBB (either case)"""
    return isinstance(color, str) and _hex_color_re.fullmatch(color) is not None


def file_name_from_path(path):
    """
    Display name of a file: its base name without the last extension.

    A leading-dot name such as '.bashrc' has no stem and yields ''.
    """
    base = os.path.basename(path)
    stem, dot, _ = base.rpartition('.')
    return stem if dot else base


def unique_ids(ids):
    """Drop duplicate ids, keeping first-seen order"""
    return list(dict.fromkeys(ids or []))
