"""Player statistics snapshot as returned by the player-detail endpoint."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Type, Union


def _field(data: Dict[str, Any], key: str, kind: Union[Type, Tuple[Type, ...]]):
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    # bool is a subclass of int; JSON true/false is never a count.
    if isinstance(value, bool) and kind is not bool:
        raise ValueError(f"field {key!r} must not be a boolean")
    if not isinstance(value, kind):
        raise ValueError(f"field {key!r} has unexpected type {type(value).__name__}")
    return value


def _number(data: Dict[str, Any], key: str) -> float:
    return float(_field(data, key, (int, float)))


@dataclass
class ScoreStats:
    total_score: int
    total_ranked_score: int
    average_ranked_accuracy: float
    total_play_count: int
    ranked_play_count: int
    replays_watched: int

    def to_json(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "totalRankedScore": self.total_ranked_score,
            "averageRankedAccuracy": self.average_ranked_accuracy,
            "totalPlayCount": self.total_play_count,
            "rankedPlayCount": self.ranked_play_count,
            "replaysWatched": self.replays_watched,
        }

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "ScoreStats":
        if not isinstance(data, dict):
            raise ValueError("scoreStats must be an object")
        return ScoreStats(
            total_score=_field(data, "totalScore", int),
            total_ranked_score=_field(data, "totalRankedScore", int),
            average_ranked_accuracy=_number(data, "averageRankedAccuracy"),
            total_play_count=_field(data, "totalPlayCount", int),
            ranked_play_count=_field(data, "rankedPlayCount", int),
            replays_watched=_field(data, "replaysWatched", int),
        )


@dataclass
class PlayerData:
    id: str
    name: str
    profile_picture: str
    country: str
    pp: float
    rank: int
    country_rank: int
    histories: str
    banned: bool
    inactive: bool
    score_stats: ScoreStats
    first_seen: str

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "profilePicture": self.profile_picture,
            "country": self.country,
            "pp": self.pp,
            "rank": self.rank,
            "countryRank": self.country_rank,
            "histories": self.histories,
            "banned": self.banned,
            "inactive": self.inactive,
            "scoreStats": self.score_stats.to_json(),
            "firstSeen": self.first_seen,
        }

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "PlayerData":
        """Build a snapshot from the API body, rejecting incomplete records."""
        if not isinstance(data, dict):
            raise ValueError("player data must be an object")
        return PlayerData(
            id=_field(data, "id", str),
            name=_field(data, "name", str),
            profile_picture=_field(data, "profilePicture", str),
            country=_field(data, "country", str),
            pp=_number(data, "pp"),
            rank=_field(data, "rank", int),
            country_rank=_field(data, "countryRank", int),
            histories=_field(data, "histories", str),
            banned=_field(data, "banned", bool),
            inactive=_field(data, "inactive", bool),
            score_stats=ScoreStats.from_json(_field(data, "scoreStats", dict)),
            first_seen=_field(data, "firstSeen", str),
        )
