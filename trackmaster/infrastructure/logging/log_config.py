"""Logging setup: one root level plus a level per noisy category.

Each category names the Settings field holding its level and the loggers it
governs, so SQL statements or outbound HTTP chatter can be turned up or down
without touching the application's own loggers.
"""

import logging
import sys

from trackmaster.config import Settings, get_settings

CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("log_level_sql", ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg")),
    ("log_level_http", ("httpx", "httpcore")),
    ("log_level_uvicorn", ("uvicorn", "uvicorn.access", "uvicorn.error")),
    ("log_level_lookup", ("trackmaster.infrastructure.lookup",)),
)

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels and return them keyed by logger name.

    The root logger gets a stderr handler only when nothing (uvicorn, pytest)
    installed one already.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {"root": root.level}
    for field, logger_names in CATEGORIES:
        level = _parse_level(getattr(settings, field))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Log levels: %s",
        ", ".join(f"{name}={logging.getLevelName(level)}" for name, level in applied.items()),
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
