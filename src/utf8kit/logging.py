"""Logging setup for the UTF8KIT command-line interface.

Library modules only create loggers with ``logging.getLogger(__name__)`` and
never attach handlers. The CLI wires up two outputs from here:

* a Rich console handler on stderr, so log lines never mix with the bytes a
  command writes to stdout;
* an optional flight recorder, a ``MemoryHandler`` that holds recent DEBUG
  records and dumps them to a file once a WARNING (or worse) shows up.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
import unicodedata
from logging.handlers import MemoryHandler
from pathlib import Path

import regex
from rich.console import Console
from rich.logging import RichHandler

from utf8kit.engine.capability import native_codec_support

PROJECT_PREFIX = "utf8kit"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from foreign loggers with ``[package]``.

    The top-level package of the logger name decides: ``utf8kit.engine`` gets
    an empty ``record.prefix``, ``click_extra.logging`` gets
    ``[click_extra]``. Records always pass.
    """

    def __init__(self, project: str = PROJECT_PREFIX) -> None:
        super().__init__()
        self.project = project

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == self.project else f"[{package}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode the level is forced to DEBUG and lines carry a timestamp,
    the logger name and a source link; otherwise third-party records are
    prefixed with their package name.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a flight recorder that buffers records in memory.

    Args:
        path: File the buffer is written to. It is only created on the first
            flush, so a clean run leaves no file behind.
        capacity: Number of records kept before a forced flush.
        flush_level: Records at this level or above trigger a flush.
        flush_on_close: Also flush whatever is buffered when the handler closes.

    Returns:
        MemoryHandler: Handler whose target writes ``path`` in UTF-8.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity, flushLevel=flush_level, target=target, flushOnClose=flush_on_close
    )


def _level_names(levels: dict[str, int]) -> dict[str, str] | str:
    if not levels:
        return "<none>"
    return {name: logging.getLevelName(lvl) for name, lvl in levels.items()}


def log_startup(  # pylint: disable=too-many-arguments
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Emit one INFO summary line, then one DEBUG line per runtime detail."""
    logger.info(
        "UTF8KIT %s, console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    details: list[tuple[str, object]] = [
        ("Python", platform.python_version()),
        ("Platform", f"{platform.system()} {platform.release()}"),
        ("PID", os.getpid()),
        ("CWD", Path.cwd()),
        ("regex", regex.__version__),
        ("Unicode data", unicodedata.unidata_version),
        ("Native codec fast path", native_codec_support()),
        ("Filesystem encoding", sys.getfilesystemencoding()),
        ("Handlers", [type(h).__name__ for h in handlers]),
    ]
    if flight_recorder:
        details.append(
            (
                "Flight recorder",
                f"path={log_path or '<none>'}, capacity={flight_capacity}, "
                f"flush_on_close={force_flush_fr}",
            )
        )
    details.append(("Per-logger overrides", _level_names(logger_levels)))

    for label, value in details:
        logger.debug("%s: %s", label, value)
