"""Print every stored snapshot, optionally re-sending each one to the webhook."""
import argparse
import json
import logging
import sys

from .config import load_config, load_settings
from .errors import NotifyError, StoreError
from .log import configure_logging
from .storage.db import open_store, read_all
from .webhook.sender import notify

log = logging.getLogger("sabrestats.dump")


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Dump stored SabreStats snapshots as JSON lines.",
    )
    parser.add_argument(
        "--db-path",
        help="SQLite file holding the latest snapshots.",
    )
    parser.add_argument(
        "--notify",
        action="store_true",
        help="Re-send every stored snapshot to the webhook.",
    )
    return parser.parse_args(argv)


def main(argv=None, out=None) -> int:
    args = _parse_args(argv)
    out = out or sys.stdout
    cfg = load_config()
    configure_logging(cfg=cfg)
    settings = load_settings(cfg)
    db_path = args.db_path or settings.db_path

    try:
        with open_store(db_path, readonly=True) as store:
            players = read_all(store)
    except StoreError as exc:
        log.critical("FATAL: %s", exc)
        return 1

    for player in players:
        out.write(json.dumps(player.to_json(), sort_keys=True) + "\n")
    log.info("Dumped %d stored player(s) from %s", len(players), db_path)

    if not args.notify:
        return 0

    failures = 0
    for player in players:
        try:
            notify(player, timeout=settings.request_timeout)
        except NotifyError as exc:
            failures += 1
            log.error("Backfill notify failed for %s: %s", player.id, exc)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
