import pytest

from sabrestats.models.player import PlayerData


def test_from_json_keeps_every_value(player_payload):
    data = PlayerData.from_json(player_payload)

    assert data.id == "1"
    assert data.name == "Alice"
    assert data.pp == 12345.678
    assert data.rank == 5
    assert data.country_rank == 2
    assert data.histories == "10,9,8,7,6,5"
    assert data.banned is False
    assert data.score_stats.total_score == 1000
    assert data.score_stats.average_ranked_accuracy == 94.5678
    assert data.to_json() == player_payload


def test_from_json_accepts_integral_floats(player_payload):
    player_payload["pp"] = 0
    player_payload["scoreStats"]["averageRankedAccuracy"] = 100

    data = PlayerData.from_json(player_payload)

    assert data.pp == 0.0
    assert data.score_stats.average_ranked_accuracy == 100.0


def test_from_json_ignores_unknown_keys(player_payload):
    player_payload["badges"] = []
    assert PlayerData.from_json(player_payload).name == "Alice"


@pytest.mark.parametrize(
    "mutate",
    [
        lambda p: p.pop("rank"),
        lambda p: p.pop("scoreStats"),
        lambda p: p["scoreStats"].pop("replaysWatched"),
        lambda p: p.update(rank="5"),
        lambda p: p.update(rank=True),
        lambda p: p.update(banned=0),
        lambda p: p.update(scoreStats=[]),
        lambda p: p.pop("firstSeen"),
    ],
)
def test_from_json_rejects_incomplete_records(player_payload, mutate):
    mutate(player_payload)
    with pytest.raises(ValueError):
        PlayerData.from_json(player_payload)


def test_field_names_are_case_sensitive(player_payload):
    player_payload["countryrank"] = player_payload.pop("countryRank")
    with pytest.raises(ValueError):
        PlayerData.from_json(player_payload)
