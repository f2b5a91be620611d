import logging
import os

# ----------------------------
# Defaults & Env Overrides
# ----------------------------

LOG_ENV_PREFIX = "CACHETCK_LOG_"

LOG_DEFAULT_NAME = "cachetck"
LOG_DEFAULT_LEVEL = logging.INFO
LOG_DEFAULT_JSON = False
LOG_DEFAULT_STDERR = False
LOG_DEFAULT_MAX_BYTES = 5 * 1024 * 1024
LOG_DEFAULT_BACKUPS = 2

LOG_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(suffix: str, default: bool) -> bool:
    v = os.getenv(f"{LOG_ENV_PREFIX}{suffix}")
    if v is None:
        return default
    return v.strip().lower() in _TRUTHY


def env_log_level() -> int:
    lvl = os.getenv(f"{LOG_ENV_PREFIX}LEVEL", "").upper()
    return LOG_LEVEL_MAP.get(lvl, LOG_DEFAULT_LEVEL)


def env_log_json(default: bool = LOG_DEFAULT_JSON) -> bool:
    return _env_flag("JSON", default)


def env_log_stderr(default: bool = LOG_DEFAULT_STDERR) -> bool:
    return _env_flag("STDERR", default)
