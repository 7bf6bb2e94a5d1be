import logging
import os
from typing import Optional

import requests

from ..config import DEFAULT_REQUEST_TIMEOUT
from ..errors import NotifyError
from ..models.player import PlayerData
from .messages import build_player_payload

log = logging.getLogger("sabrestats.webhook")

WEBHOOK_ENV = "WEBHOOK_URL"
MISSING_WEBHOOK_URL = "WEBHOOK_URL_NOT_SET"


def _get_webhook_url() -> str:
    """
    Returns the configured webhook URL, or the MISSING_WEBHOOK_URL sentinel.
    """
    url = (os.getenv(WEBHOOK_ENV) or "").strip()
    return url or MISSING_WEBHOOK_URL


def post_webhook_payload(
    payload: dict,
    *,
    webhook_url: Optional[str] = None,
    timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT,
    session=None,
) -> None:
    """
    POST a JSON payload to the webhook.

    Raises NotifyError when no destination is configured (without sending
    anything), on transport failure, or on a non-2xx response.
    """
    url = (webhook_url or "").strip() or _get_webhook_url()

    if url == MISSING_WEBHOOK_URL:
        raise NotifyError(f"{WEBHOOK_ENV} is not set")

    http = session or requests
    try:
        resp = http.post(url, json=payload, timeout=timeout)
    except requests.RequestException as exc:
        raise NotifyError(f"request to webhook failed: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        raise NotifyError(f"HTTP {resp.status_code} from webhook: {resp.text}")

    log.info("[webhook] Message delivered successfully")


def notify(
    data: PlayerData,
    *,
    webhook_url: Optional[str] = None,
    timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT,
    session=None,
) -> None:
    log.info("[webhook] Sending snapshot for %s (%s)", data.name, data.id)
    post_webhook_payload(
        build_player_payload(data),
        webhook_url=webhook_url,
        timeout=timeout,
        session=session,
    )
