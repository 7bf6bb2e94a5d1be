"""Fetch player statistics from the ScoreSaber-style player API."""
import logging
from typing import Optional

import requests

from ..config import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT
from ..errors import FetchError
from ..models.player import PlayerData

log = logging.getLogger("sabrestats.fetch")


def player_url(player_id: str, base_url: str = DEFAULT_API_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/player/{player_id}/full"


def fetch_player_data(
    player_id: str,
    *,
    base_url: str = DEFAULT_API_BASE_URL,
    timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT,
    session=None,
) -> PlayerData:
    """
    Fetch one complete snapshot for ``player_id``.

    Raises FetchError on transport failure, non-2xx status or a body that
    does not decode into PlayerData. Nothing is returned on partial data.
    """
    http = session or requests
    url = player_url(player_id, base_url)
    log.info("Fetching %s", url)

    try:
        resp = http.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"request to {url} failed: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        raise FetchError(f"HTTP {resp.status_code} from {url}")

    try:
        body = resp.json()
    except ValueError as exc:
        raise FetchError(f"invalid JSON from {url}") from exc

    try:
        return PlayerData.from_json(body)
    except ValueError as exc:
        raise FetchError(f"unexpected player payload from {url}: {exc}") from exc
