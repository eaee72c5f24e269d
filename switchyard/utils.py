# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py

Logging setup for Switchyard entry points.

`setup_logging` attaches one console handler and, optionally, one file handler
to the root logger. The console handler is picked by mode:

- "cli": a `RichHandler` for people at a terminal.
- "json": a plain stream handler with a JSON formatter, for log collectors.

When no mode is passed, `SWITCHYARD_LOG_MODE` decides, and containers default
to "json".
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODE_ENV = "SWITCHYARD_LOG_MODE"
LOG_MODES = ("cli", "json")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def resolve_log_mode(mode: str | None = None) -> str:
    """Return the logging mode to use, validating explicit and env-provided values."""
    if not mode:
        mode = os.getenv(LOG_MODE_ENV) or ("json" if running_in_container() else "cli")
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")
    return mode


def build_console_handler(mode: str, level: int) -> logging.Handler:
    if mode == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        # Output lines are plain text; keep log records from being read as markup.
        handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler.setLevel(level)
    return handler


def build_file_handler(filename: str, level: int, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(filename, "a", "UTF-8")
    handler.setLevel(level)
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = "switchyard.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure the root logger for a Switchyard program.

    Args:
        mode (str | None): "cli" or "json". Defaults to `SWITCHYARD_LOG_MODE`,
            then to container detection.
        log_filename (str | None): File to append logs to. None skips file logging.
        json_log_to_file (bool): Write the file log as JSON lines.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.

    Existing root handlers are replaced, and the "switchyard" logger propagates
    to them.

    Raises:
        ValueError: If the mode is not "cli" or "json".
    """
    mode = resolve_log_mode(mode)
    handlers = [build_console_handler(mode, console_log_level)]
    if log_filename:
        handlers.append(build_file_handler(log_filename, file_log_level, json_log_to_file))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)

    logger = logging.getLogger("switchyard")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
