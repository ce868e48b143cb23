"""Logging configuration for git-sync"""
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_FILE_NAME = 'git-sync.log'

# Module path prefixes dropped from logger names, in order
_NAME_PREFIXES = ('git_sync.', 'services.')


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',     # cyan
        logging.INFO: '\033[32m',      # green
        logging.WARNING: '\033[33m',   # yellow
        logging.ERROR: '\033[31m',     # red
        logging.CRITICAL: '\033[35m',  # magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt=None, datefmt=None, stream: Optional[TextIO] = None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        stream = stream if stream is not None else sys.stderr
        self.use_color = hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return super().format(record)
        # Other handlers (the debug log file) share the record
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def _log_file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / LOG_FILE_NAME, mode='w')  # one run per file
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(verbose: bool = False, debug: bool = False, log_dir: Optional[Path] = None) -> None:
    """
    Configure logging for a run.

    Diagnostics go to stderr so they never mix with the branch report on
    stdout. Warnings only by default, INFO with verbose, DEBUG with debug.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages and also write them to a log file
        log_dir: Directory for the debug log file (default: ~/.git-sync)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if debug:
        root_logger.addHandler(_log_file_handler(log_dir or Path.home() / '.git-sync'))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    if debug:
        formatter = ColoredFormatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT)
    else:
        formatter = ColoredFormatter(fmt='[%(name)s] %(message)s')
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # GitPython logs every command it runs at DEBUG
    logging.getLogger('git').setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module, named without the package path.

    Example:
        get_logger("git_sync.services.upstream_resolver").name == "upstream_resolver"
    """
    for prefix in _NAME_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
    return logging.getLogger(name)
