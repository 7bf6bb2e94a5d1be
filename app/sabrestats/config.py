"""
Configuration loading for SabreStats.

Settings come from a JSON file (``SABRESTATS_CONFIG``) with environment
variables taking precedence over file values.
"""

import json
import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.getenv(
    "SABRESTATS_CONFIG",
    "/data/sabrestats.json",
)

DEFAULT_API_BASE_URL = "https://scoresaber.com/api"
DEFAULT_DB_PATH = "/data/sabrestats.db"
DEFAULT_POLL_INTERVAL = 600.0
DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    player_ids: List[str] = field(default_factory=list)
    api_base_url: str = DEFAULT_API_BASE_URL
    db_path: str = DEFAULT_DB_PATH
    poll_interval: float = DEFAULT_POLL_INTERVAL
    request_timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT


def load_config(path: Optional[str] = None) -> dict:
    """
    Load the SabreStats configuration from disk.

    A missing or unreadable file is logged and treated as empty so the
    environment (or defaults) can still drive the process.
    """
    path = path or DEFAULT_CONFIG_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.error("Config file not found: %s", path)
        return {}
    except Exception:
        log.exception("Failed to load config")
        return {}

    if not isinstance(data, dict):
        log.error("Config file %s must contain a JSON object", path)
        return {}
    return data


def _as_float(name: str, raw, default: Optional[float]) -> Optional[float]:
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        log.warning("Invalid %s %r; using %s", name, raw, default)
        return default
    if value <= 0:
        log.warning("Non-positive %s %r; using %s", name, raw, default)
        return default
    return value


def list_players(cfg: dict) -> List[str]:
    env_ids = os.getenv("SABRESTATS_PLAYER_IDS")
    if env_ids:
        return [pid.strip() for pid in env_ids.split(",") if pid.strip()]

    players = cfg.get("players") or []
    if not isinstance(players, list):
        log.warning("'players' must be a list; ignoring %r", players)
        return []
    return [str(pid).strip() for pid in players if str(pid).strip()]


def load_settings(cfg: Optional[dict] = None) -> Settings:
    if cfg is None:
        cfg = load_config()

    timeout_raw = os.getenv("SABRESTATS_REQUEST_TIMEOUT", cfg.get("request_timeout", ""))
    if timeout_raw is None:
        # explicit null in the config file means "use the transport default"
        request_timeout = None
    else:
        request_timeout = _as_float("request_timeout", timeout_raw, DEFAULT_REQUEST_TIMEOUT)

    return Settings(
        player_ids=list_players(cfg),
        api_base_url=(
            os.getenv("SABRESTATS_API_BASE_URL")
            or cfg.get("api_base_url")
            or DEFAULT_API_BASE_URL
        ).rstrip("/"),
        db_path=os.getenv("SABRESTATS_DB_PATH") or cfg.get("db_path") or DEFAULT_DB_PATH,
        poll_interval=_as_float(
            "poll_interval",
            os.getenv("SABRESTATS_POLL_INTERVAL", cfg.get("poll_interval")),
            DEFAULT_POLL_INTERVAL,
        ),
        request_timeout=request_timeout,
    )
