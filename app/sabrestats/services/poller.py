"""Fetch → store → notify polling loop."""
import logging
import sqlite3
import threading
from typing import Callable, Optional

from ..config import Settings
from ..errors import FetchError, NotifyError, StoreError
from ..models.player import PlayerData
from ..storage.db import upsert
from ..webhook.sender import notify
from .fetch import fetch_player_data
from .metrics import PollMetrics

log = logging.getLogger("sabrestats.poller")


class Poller:
    """
    Runs polling iterations against one open store until stopped.

    Each iteration handles every configured player in turn. The store and
    notify steps are independent: a failed upsert does not prevent the
    notification for the same snapshot.
    """

    def __init__(
        self,
        store: sqlite3.Connection,
        settings: Settings,
        *,
        metrics: Optional[PollMetrics] = None,
        fetcher: Callable[..., PlayerData] = fetch_player_data,
        notifier: Callable[..., None] = notify,
    ):
        self.store = store
        self.settings = settings
        self.metrics = metrics or PollMetrics()
        self.fetcher = fetcher
        self.notifier = notifier
        self._stop = threading.Event()
        self.iterations = 0

    def stop(self) -> None:
        self._stop.set()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def poll_player(self, player_id: str) -> None:
        try:
            data = self.fetcher(
                player_id,
                base_url=self.settings.api_base_url,
                timeout=self.settings.request_timeout,
            )
        except FetchError as exc:
            self.metrics.record("fetch", player_id, False, exc)
            return
        self.metrics.record("fetch", player_id, True)

        try:
            upsert(self.store, data)
        except StoreError as exc:
            self.metrics.record("store", player_id, False, exc)
        else:
            self.metrics.record("store", player_id, True)

        try:
            self.notifier(data, timeout=self.settings.request_timeout)
        except NotifyError as exc:
            self.metrics.record("notify", player_id, False, exc)
        else:
            self.metrics.record("notify", player_id, True)

    def run_once(self) -> None:
        self.iterations += 1
        if not self.settings.player_ids:
            log.warning("No players configured; skipping poll.")
            return

        for player_id in self.settings.player_ids:
            try:
                self.poll_player(player_id)
            except Exception:
                log.exception("Unexpected failure polling player %s", player_id)

    def run(self, max_iterations: Optional[int] = None) -> int:
        """
        Poll until stop() is called, or max_iterations have run.

        Returns the number of iterations completed by this call.
        """
        done = 0
        log.info(
            "Polling %d player(s) every %ss",
            len(self.settings.player_ids),
            self.settings.poll_interval,
        )
        while not self.stopped:
            self.run_once()
            done += 1
            if max_iterations is not None and done >= max_iterations:
                break
            if self._stop.wait(self.settings.poll_interval):
                break
        log.info("Poller stopped after %d iteration(s); %s", done, self.metrics.snapshot())
        return done
