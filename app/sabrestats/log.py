"""Logging setup shared by the SabreStats entry points."""
import logging
import os
from typing import Optional

from .config import load_config

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# urllib3 logs every pooled connection at DEBUG
NOISY_LOGGERS = ("urllib3",)


def level_from_name(name, default: int = logging.INFO) -> int:
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


def resolve_log_level(cfg: dict) -> int:
    env_level = os.getenv("SABRESTATS_LOG_LEVEL")
    if env_level:
        return level_from_name(env_level)
    return level_from_name((cfg.get("logging") or {}).get("level", "INFO"))


def configure_logging(level: Optional[int] = None, cfg: Optional[dict] = None) -> int:
    """Configure the root logger once; returns the level in effect."""
    if cfg is None:
        cfg = load_config()
    resolved = level if level is not None else resolve_log_level(cfg)
    fmt = (cfg.get("logging") or {}).get("format") or DEFAULT_LOG_FORMAT
    logging.basicConfig(level=resolved, format=fmt)

    if resolved > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    return resolved
