"""
Webhook embed builders.

RULES:
- No network calls
- No logging
- No environment access
- Always return a JSON-serializable dict

The field layout is what the receiving Discord channel renders as a
two-column table: numeric fields come in inline pairs and every pair is
closed by an inline zero-width spacer, which pushes the next pair onto a
new row.
"""

from typing import Any, Dict, List

from ..models.player import PlayerData
from ..utils import format_number, iso_date

# 0xFFDF00
EMBED_COLOR = 16768768

PROFILE_URL = "https://scoresaber.com/u/{player_id}"

ZERO_WIDTH = "\u200b"


def _inline(name: str, value: str) -> Dict[str, Any]:
    return {"name": name, "value": value, "inline": True}


def _spacer() -> Dict[str, Any]:
    return _inline(ZERO_WIDTH, ZERO_WIDTH)


def _paired_rows(pairs: List[tuple]) -> List[Dict[str, Any]]:
    fields: List[Dict[str, Any]] = []
    for left, right in pairs:
        fields.append(_inline(*left))
        fields.append(_inline(*right))
        fields.append(_spacer())
    return fields


def build_player_embed(data: PlayerData) -> Dict[str, Any]:
    stats = data.score_stats
    description = (
        f"Country Rank: #{format_number(data.country_rank)}\n"
        f"Country: {data.country}\n"
        f"First Seen: {iso_date(data.first_seen)}"
    )

    fields = [{"name": "Player", "value": description, "inline": False}]
    fields.extend(
        _paired_rows(
            [
                (
                    ("Total Score", format_number(stats.total_score)),
                    ("Total Ranked Score", format_number(stats.total_ranked_score)),
                ),
                (
                    ("Avg Ranked Accuracy", f"{stats.average_ranked_accuracy:.2f}%"),
                    ("Performance Points", f"{data.pp:,.2f}pp"),
                ),
                (
                    ("Ranked Play Count", format_number(stats.ranked_play_count)),
                    ("Total Play Count", format_number(stats.total_play_count)),
                ),
            ]
        )
    )

    return {
        "author": {
            "name": f"{data.name} #{data.rank}",
            "icon_url": data.profile_picture,
            "url": PROFILE_URL.format(player_id=data.id),
        },
        "color": EMBED_COLOR,
        "fields": fields,
    }


def build_player_payload(data: PlayerData) -> Dict[str, Any]:
    return {"embeds": [build_player_embed(data)]}
