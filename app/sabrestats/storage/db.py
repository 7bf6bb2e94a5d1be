# sabrestats/storage/db.py

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from ..errors import StoreError
from ..models.player import PlayerData, ScoreStats

log = logging.getLogger("sabrestats.storage")

TABLE = "players"

# Column order of the players table; ScoreStats fields sit beside the
# player fields.
COLUMNS = (
    "id",
    "name",
    "profile_picture",
    "country",
    "pp",
    "rank",
    "country_rank",
    "histories",
    "banned",
    "inactive",
    "total_score",
    "total_ranked_score",
    "average_ranked_accuracy",
    "total_play_count",
    "ranked_play_count",
    "replays_watched",
    "first_seen",
)

SCHEMA = f"""
    CREATE TABLE IF NOT EXISTS {TABLE} (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        profile_picture TEXT,
        country TEXT,
        pp REAL,
        rank INTEGER,
        country_rank INTEGER,
        histories TEXT,
        banned INTEGER NOT NULL DEFAULT 0,
        inactive INTEGER NOT NULL DEFAULT 0,

        -- score stats
        total_score INTEGER,
        total_ranked_score INTEGER,
        average_ranked_accuracy REAL,
        total_play_count INTEGER,
        ranked_play_count INTEGER,
        replays_watched INTEGER,

        first_seen TEXT
    )
"""

UPSERT_SQL = (
    f"INSERT OR REPLACE INTO {TABLE} ({', '.join(COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in COLUMNS)})"
)


def connect(db_path: str, readonly: bool = False) -> sqlite3.Connection:
    """
    Open the store, creating its parent directory when needed.

    A readonly connection never creates anything: a missing file is an error.
    """
    try:
        if readonly:
            uri = Path(db_path).resolve().as_uri() + "?mode=ro"
            conn = sqlite3.connect(uri, timeout=30.0, uri=True)
        else:
            db_dir = os.path.dirname(db_path)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)
            conn = sqlite3.connect(db_path, timeout=30.0)
    except (OSError, sqlite3.Error) as exc:
        raise StoreError(f"Failed to open store at {db_path}: {exc}") from exc
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def open_store(db_path: str, readonly: bool = False) -> Iterator[sqlite3.Connection]:
    """Yield a connection for the lifetime of the block, closing it afterwards."""
    conn = connect(db_path, readonly=readonly)
    log.info("Opened store %s", db_path)
    try:
        yield conn
    finally:
        conn.close()
        log.info("Closed store %s", db_path)


def ensure_schema(store: sqlite3.Connection) -> None:
    try:
        with store:
            store.execute(SCHEMA)
    except sqlite3.Error as exc:
        raise StoreError(f"Failed to create {TABLE} table: {exc}") from exc


def _to_row(data: PlayerData) -> tuple:
    stats = data.score_stats
    return (
        data.id,
        data.name,
        data.profile_picture,
        data.country,
        data.pp,
        data.rank,
        data.country_rank,
        data.histories,
        int(data.banned),
        int(data.inactive),
        stats.total_score,
        stats.total_ranked_score,
        stats.average_ranked_accuracy,
        stats.total_play_count,
        stats.ranked_play_count,
        stats.replays_watched,
        data.first_seen,
    )


def _from_row(row: sqlite3.Row) -> PlayerData:
    return PlayerData(
        id=row["id"],
        name=row["name"],
        profile_picture=row["profile_picture"],
        country=row["country"],
        pp=row["pp"],
        rank=row["rank"],
        country_rank=row["country_rank"],
        histories=row["histories"],
        banned=bool(row["banned"]),
        inactive=bool(row["inactive"]),
        score_stats=ScoreStats(
            total_score=row["total_score"],
            total_ranked_score=row["total_ranked_score"],
            average_ranked_accuracy=row["average_ranked_accuracy"],
            total_play_count=row["total_play_count"],
            ranked_play_count=row["ranked_play_count"],
            replays_watched=row["replays_watched"],
        ),
        first_seen=row["first_seen"],
    )


def upsert(store: sqlite3.Connection, data: PlayerData) -> None:
    """Replace the row for ``data.id`` with this snapshot (last write wins)."""
    # sqlite3 raises OverflowError for ints outside the signed 64-bit range
    try:
        with store:
            store.execute(UPSERT_SQL, _to_row(data))
    except (sqlite3.Error, OverflowError) as exc:
        raise StoreError(f"Failed to upsert player {data.id}: {exc}") from exc
    log.debug("Stored snapshot for player %s", data.id)


def read_all(store: sqlite3.Connection) -> List[PlayerData]:
    """Return every stored snapshot in the engine's row order."""
    try:
        rows = store.execute(f"SELECT * FROM {TABLE}").fetchall()
    except sqlite3.Error as exc:
        raise StoreError(f"Failed to read {TABLE}: {exc}") from exc

    try:
        return [_from_row(row) for row in rows]
    except (IndexError, KeyError) as exc:
        raise StoreError(f"Unexpected {TABLE} schema: {exc}") from exc
