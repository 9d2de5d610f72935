import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO


CONSOLE_FORMAT = "%(asctime_colored)s [%(levelname_colored)s] %(name_colored)s %(filename_colored)s:%(lineno_colored)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(filename)s:%(lineno)d: %(message)s"


class ColorFormatter(logging.Formatter):
    RESET = "\x1b[0m"

    TIME_COLOR = "\x1b[90m"
    NAME_COLOR = "\x1b[90m"
    FILE_COLOR = "\x1b[38;5;250m"
    LINE_COLOR = "\x1b[38;5;222m"

    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[36m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }

    def _paint(self, color: str, text: object) -> str:
        return f"{color}{text}{self.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        record.asctime_colored = self._paint(self.TIME_COLOR, self.formatTime(record, self.datefmt))
        record.levelname_colored = self._paint(self.LEVEL_COLORS.get(record.levelno, ""), f"{record.levelname:<8}")
        record.name_colored = self._paint(self.NAME_COLOR, record.name)
        record.filename_colored = self._paint(self.FILE_COLOR, record.filename)
        record.lineno_colored = self._paint(self.LINE_COLOR, record.lineno)

        return super().format(record)


def setup_logger(
    name: str = "gtenum",
    log_dir: str | Path | None = None,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the root logger once: colored console output (stdout unless `stream`
    is given), plus a session file under `log_dir` if given.
    """
    root_logger = logging.getLogger()

    if getattr(root_logger, "_gtenum_configured", False):
        return logging.getLogger(name)

    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColorFormatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        date_str = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(log_dir) / f"{date_str}_{name}.log"

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)
        root_logger._gtenum_log_file = str(log_file)  # type: ignore

    root_logger._gtenum_configured = True  # type: ignore

    return logging.getLogger(name)
