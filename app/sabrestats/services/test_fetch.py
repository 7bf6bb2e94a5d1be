import pytest

from sabrestats.errors import FetchError
from sabrestats.services.fetch import fetch_player_data, player_url


def test_player_url_targets_full_endpoint():
    assert player_url("42", "https://example.test/api/") == "https://example.test/api/player/42/full"


def test_fetch_decodes_player(player_payload, fake_session, fake_response):
    session = fake_session(fake_response(200, player_payload))

    data = fetch_player_data("1", base_url="https://example.test/api", timeout=5, session=session)

    assert data.name == "Alice"
    assert data.score_stats.ranked_play_count == 40
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "https://example.test/api/player/1/full")
    assert kwargs["timeout"] == 5


@pytest.mark.parametrize("status", [301, 404, 429, 500])
def test_fetch_non_2xx_raises(status, fake_session, fake_response):
    with pytest.raises(FetchError, match=str(status)):
        fetch_player_data("1", session=fake_session(fake_response(status, {})))


def test_fetch_transport_error_raises(fake_session, connection_error):
    with pytest.raises(FetchError):
        fetch_player_data("1", session=fake_session(connection_error))


def test_fetch_invalid_json_raises(fake_session, fake_response):
    session = fake_session(fake_response(200, ValueError("Expecting value")))
    with pytest.raises(FetchError, match="invalid JSON"):
        fetch_player_data("1", session=session)


def test_fetch_shape_mismatch_raises(player_payload, fake_session, fake_response):
    del player_payload["scoreStats"]
    with pytest.raises(FetchError, match="scoreStats"):
        fetch_player_data("1", session=fake_session(fake_response(200, player_payload)))
