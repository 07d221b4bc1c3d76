"""Environment-driven defaults for natdoc."""

import logging
import os

log = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        log.warning(f"{name}={value!r} is not an integer, using {default}")
        return default


def _log_level_env(name: str, default: str) -> str:
    value = os.environ.get(name, default).upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(value), int):
        log.warning(f"{name}={value!r} is not a log level, using {default}")
        return default
    return value


# Indentation of the pretty-printed user and developer documents
JSON_INDENT = _int_env("NATDOC_JSON_INDENT", 4)

LOG_LEVEL = _log_level_env("NATDOC_LOG_LEVEL", "WARNING")

# Treat validation warnings (e.g. undocumented functions) as errors
STRICT = os.environ.get("NATDOC_STRICT", "").lower() in ("1", "true")
