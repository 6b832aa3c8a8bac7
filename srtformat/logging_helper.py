import logging
import sys
from typing import TextIO, Union

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

LEVELS = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _build_logger() -> logging.Logger:
    logger = logging.getLogger("srtformat")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    # stdout carries the formatted subtitles, so every record goes to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


_LOGGER = _build_logger()


def bind_stream(stream: TextIO) -> TextIO:
    """Point the log handler at `stream` and return the stream it wrote to before."""
    handler = _LOGGER.handlers[0]
    previous = handler.stream
    handler.setStream(stream)
    return previous


def resolve_level(level: Union[str, None]) -> int:
    lvl = str(level or "").strip().lower()
    return LEVELS.get(lvl, logging.INFO)


def set_log_level(level: Union[str, None]) -> int:
    """Set logger level based on config/CLI string. Unknown names mean info."""
    resolved = resolve_level(level)
    _LOGGER.setLevel(resolved)
    return resolved


def get_logger() -> logging.Logger:
    return _LOGGER


def log_trace(message: str) -> None:
    _LOGGER.log(TRACE_LEVEL, message)


def log_debug(message: str) -> None:
    _LOGGER.debug(message)


def log_info(message: str) -> None:
    _LOGGER.info(message)


def log_warn(message: str) -> None:
    _LOGGER.warning(message)


def log_error(message: str) -> None:
    _LOGGER.error(message)


def log_trace_block(title: str, body: str) -> None:
    """Log a multi-line block at TRACE level with consistent framing."""
    if not _LOGGER.isEnabledFor(TRACE_LEVEL):
        return
    log_trace(f"{title} BEGIN")
    for line in (body or "").splitlines() or [""]:
        log_trace(line)
    log_trace(f"{title} END")
