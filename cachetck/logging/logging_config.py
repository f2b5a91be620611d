from __future__ import annotations

import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Iterable, Optional

try:
    from appdirs import user_log_dir
except Exception:  # pragma: no cover
    user_log_dir = None  # type: ignore

from cachetck.constants.logging_constants import (
    LOG_DEFAULT_BACKUPS,
    LOG_DEFAULT_JSON,
    LOG_DEFAULT_LEVEL,
    LOG_DEFAULT_MAX_BYTES,
    LOG_DEFAULT_NAME,
    LOG_DEFAULT_STDERR,
    LOG_ENV_PREFIX,
    LOG_LEVEL_MAP,
    env_log_json,
    env_log_level,
    env_log_stderr,
)

# Logger names already carrying our handlers
_CONFIGURED_ROOTS: set[str] = set()

# LogRecord attributes that are never copied into the JSON payload
_RESERVED_ATTRS = frozenset(
    {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "funcName", "levelname", "levelno", "lineno", "module", "msecs",
        "msg", "name", "pathname", "process", "processName", "relativeCreated",
        "stack_info", "thread", "threadName", "taskName",
    }
)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(f"{LOG_ENV_PREFIX}{name}")
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _coerce_level(level: int | str | None) -> int:
    if level is None:
        return env_log_level()
    if isinstance(level, str):
        return LOG_LEVEL_MAP.get(level.upper(), LOG_DEFAULT_LEVEL)
    return int(level)


def _resolve_log_file(default_name: str = "cachetck.log",
                      explicit_path: Optional[Path] = None) -> Optional[Path]:
    """
    Decide where the file handler writes.

    Priority:
      1) explicit argument `explicit_path`
      2) env CACHETCK_LOG_FILE
      3) appdirs user_log_dir()
      4) None (no file handler)
    """
    candidate: Optional[Path] = None
    if explicit_path is not None:
        candidate = Path(explicit_path).expanduser()
    elif os.getenv(f"{LOG_ENV_PREFIX}FILE"):
        candidate = Path(os.environ[f"{LOG_ENV_PREFIX}FILE"]).expanduser()
    elif user_log_dir is not None:
        candidate = Path(user_log_dir("cachetck", "cachetck")) / default_name

    if candidate is None:
        return None
    try:
        candidate.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return candidate


class _JsonFormatter(logging.Formatter):
    """
    One JSON object per line; extra record attributes are carried over when serializable.
    """

    def __init__(self, *, use_utc: bool = False) -> None:
        super().__init__()
        self._use_utc = use_utc

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # type: ignore[override]
        if self._use_utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created))
        return super().formatTime(record, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS or k.startswith("_"):
                continue
            try:
                json.dumps(v)
                payload[k] = v
            except (TypeError, ValueError):
                payload[k] = str(v)

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)  # type: ignore[arg-type]
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)
        return json.dumps(payload, ensure_ascii=False)


def _formatter(fmt: str, datefmt: Optional[str], *, use_json: bool, use_utc: bool) -> logging.Formatter:
    if use_json:
        return _JsonFormatter(use_utc=use_utc)
    return logging.Formatter(fmt=fmt, datefmt=datefmt)


def _make_file_handler(path: Path, fmt: str, datefmt: Optional[str], *,
                       use_json: bool, use_utc: bool, max_bytes: int, backups: int) -> logging.Handler:
    from logging.handlers import RotatingFileHandler

    fh = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
    # file keeps everything; the logger level does the filtering
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(_formatter(fmt, datefmt, use_json=use_json, use_utc=use_utc))
    return fh


# ---------- public API ----------

def setup_logger(
    name: str = LOG_DEFAULT_NAME,
    level: int | str | None = None,
    *,
    with_console: bool | None = None,
    with_file: bool = True,
    file_path: Optional[Path] = None,
    fmt_console: str = "[%(levelname)s] %(name)s: %(message)s",
    fmt_file: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt_file: Optional[str] = "%Y-%m-%d %H:%M:%S",
    use_json: Optional[bool] = None,
    use_utc: Optional[bool] = None,
    propagate: bool = False,
    force_reconfigure: bool = False,
    extra_filters: Optional[Iterable[logging.Filter]] = None,
) -> logging.Logger:
    """
    Configure and return the package root logger.

    Idempotent per `name`: later calls only adjust the level unless
    `force_reconfigure=True`, which drops and rebuilds the handlers.

    Parameters
    ----------
    name : str
        Logger name (package root).
    level : int | str | None
        Logging level. If None, read from CACHETCK_LOG_LEVEL.
    with_console : bool | None
        Add a stderr handler. If None, read from CACHETCK_LOG_STDERR.
    with_file : bool
        Add a rotating file handler when a log file location can be resolved.
    file_path : Optional[Path]
        Force a specific log file.
    use_json : Optional[bool]
        JSON lines instead of text. If None, read from CACHETCK_LOG_JSON.
    use_utc : Optional[bool]
        UTC timestamps for JSON output. If None, read from CACHETCK_LOG_UTC.
    propagate : bool
        Whether records also reach the parent (root) logger. pytest's caplog
        needs propagation, so tests usually pass True.
    force_reconfigure : bool
        Rebuild handlers even if `name` was already configured.
    extra_filters : Optional[Iterable[logging.Filter]]
        Filters attached to the logger.

    Returns
    -------
    logging.Logger
    """
    lvl = _coerce_level(level)
    if with_console is None:
        with_console = env_log_stderr(LOG_DEFAULT_STDERR)
    if use_json is None:
        use_json = env_log_json(LOG_DEFAULT_JSON)
    if use_utc is None:
        use_utc = os.getenv(f"{LOG_ENV_PREFIX}UTC", "").strip().lower() in {"1", "true", "yes", "on"}

    logger = logging.getLogger(name)
    logger.propagate = propagate

    if name in _CONFIGURED_ROOTS:
        if not force_reconfigure:
            logger.setLevel(lvl)
            return logger
        reset_logging(name)

    logger.setLevel(lvl)

    if with_console:
        ch = logging.StreamHandler()
        ch.setLevel(lvl)
        ch.setFormatter(_formatter(fmt_console, None, use_json=bool(use_json), use_utc=bool(use_utc)))
        logger.addHandler(ch)

    if with_file:
        path = _resolve_log_file(explicit_path=file_path)
        if path is not None:
            logger.addHandler(
                _make_file_handler(
                    path, fmt_file, datefmt_file,
                    use_json=bool(use_json), use_utc=bool(use_utc),
                    max_bytes=_env_int("MAX_BYTES", LOG_DEFAULT_MAX_BYTES),
                    backups=_env_int("BACKUPS", LOG_DEFAULT_BACKUPS),
                )
            )

    for flt in extra_filters or ():
        logger.addFilter(flt)

    _CONFIGURED_ROOTS.add(name)
    return logger


def get_logger(name: str = LOG_DEFAULT_NAME) -> logging.Logger:
    """
    Return a logger under the package root, configuring the root on first use.

    Child names (``cachetck.core.caching``) are returned as plain loggers that
    inherit the root's handlers.
    """
    root = name.split(".", 1)[0]
    if root not in _CONFIGURED_ROOTS:
        setup_logger(name=root)
    return logging.getLogger(name)


class _ContextFilter(logging.Filter):
    """Inject static key/value context into every record."""

    def __init__(self, **static_context: Any) -> None:
        super().__init__()
        self._ctx = static_context

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        for k, v in self._ctx.items():
            setattr(record, k, v)
        return True


def add_context(logger: logging.Logger, **context: Any) -> None:
    """
    Attach static context (e.g., component='environment') to a logger.
    """
    if context:
        logger.addFilter(_ContextFilter(**context))


def set_global_level(level: int | str, name: str = LOG_DEFAULT_NAME) -> None:
    """Change the level of the package logger and its handlers."""
    lvl = _coerce_level(level)
    logger = get_logger(name)
    logger.setLevel(lvl)
    for h in logger.handlers:
        h.setLevel(lvl)


def reset_logging(name: str = LOG_DEFAULT_NAME) -> None:
    """
    Close and remove all handlers for `name` and mark it as unconfigured.
    """
    logger = logging.getLogger(name)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    _CONFIGURED_ROOTS.discard(name)
