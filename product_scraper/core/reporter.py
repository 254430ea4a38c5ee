"""
Error Reporter and logging setup
Terminal failures are written, timestamped, to the console and to the log
handlers (stderr + persisted log file)
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from .clock import LOG_TIME_FORMAT, now

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = 'product_scraper.log'


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    level: int = logging.INFO
) -> Optional[Path]:
    """
    Configure root logging: stderr always, plus <log_dir>/product_scraper.log

    Log file problems are not fatal; a warning goes to stderr and logging
    continues on the console only.

    Returns:
        Path of the log file, or None if file logging is unavailable
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)

    if log_dir is None:
        return None

    log_path = Path(log_dir) / LOG_FILE_NAME
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
    except OSError as e:
        print(f"Warning: file logging disabled ({e})", file=sys.stderr)
        return None

    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(file_handler)
    logger.debug(f" Logging to {log_path}")
    return log_path


def error_message(err: BaseException) -> str:
    return getattr(err, 'message', None) or str(err) or type(err).__name__


class ErrorReporter:
    """Reports terminal errors to stdout and to the error log"""

    def __init__(self, stream: Optional[TextIO] = None, log: Optional[logging.Logger] = None):
        """
        Args:
            stream: Console stream (defaults to sys.stdout at report time)
            log: Logger for the durable sink (defaults to 'product_scraper')
        """
        self.stream = stream
        self.log = log or logging.getLogger('product_scraper')

    def format(self, err: BaseException) -> str:
        return f"[{now(LOG_TIME_FORMAT)}] {error_message(err)}"

    def report(self, err: BaseException) -> str:
        """
        Write the error's message with a timestamp to both sinks

        Returns:
            The reported line
        """
        line = self.format(err)
        print(line, file=self.stream or sys.stdout)
        self.log.error(line)
        return line
