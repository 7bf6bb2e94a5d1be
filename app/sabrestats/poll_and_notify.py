"""Poll configured players, store the latest snapshot and post it to the webhook."""
import argparse
import dataclasses
import logging
import signal

from .config import load_config, load_settings
from .errors import StoreError
from .log import configure_logging
from .services.poller import Poller
from .storage.db import ensure_schema, open_store
from .version import __version__

log = logging.getLogger("sabrestats.poll")


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="SabreStats player polling worker.",
    )
    parser.add_argument(
        "--player-id",
        action="append",
        dest="player_ids",
        help="Player id to poll (repeatable). Overrides configured players.",
    )
    parser.add_argument(
        "--db-path",
        help="SQLite file holding the latest snapshots.",
    )
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds to wait between iterations.",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single iteration and exit.",
    )
    return parser.parse_args(argv)


def _install_signal_handlers(poller: Poller) -> dict:
    def _handle(signum, _frame):
        log.info("Received %s; stopping after the current step.", signal.Signals(signum).name)
        poller.stop()

    previous = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, _handle)
    return previous


def _restore_signal_handlers(previous: dict) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def main(argv=None) -> int:
    args = _parse_args(argv)
    cfg = load_config()
    configure_logging(cfg=cfg)

    settings = load_settings(cfg)
    overrides = {}
    if args.player_ids:
        overrides["player_ids"] = args.player_ids
    if args.db_path:
        overrides["db_path"] = args.db_path
    if args.interval is not None:
        if args.interval <= 0:
            log.error("Invalid interval: %s", args.interval)
            return 2
        overrides["poll_interval"] = args.interval
    settings = dataclasses.replace(settings, **overrides)

    log.info("=== SabreStats v%s starting ===", __version__)
    try:
        with open_store(settings.db_path) as store:
            ensure_schema(store)
            poller = Poller(store, settings)
            previous = _install_signal_handlers(poller)
            try:
                poller.run(max_iterations=1 if args.once else None)
            finally:
                _restore_signal_handlers(previous)
    except StoreError as exc:
        log.critical("FATAL: %s", exc)
        return 1

    log.info("=== SabreStats stopped ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
