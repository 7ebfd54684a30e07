import random

import httpx
import pytest

from zenify.client.playlist import (
    DEMO_SONGS,
    FALLBACK_MESSAGE,
    PlaylistClient,
    extract_song_list,
    sample_songs,
)
from zenify.core.errors import FetchError
from zenify.schemas.songs import SongItem

pytestmark = pytest.mark.anyio


def _client_for(handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PlaylistClient("http://catalog.test", client=http)


def _keys(songs):
    return [song.key for song in songs]


async def test_samples_at_most_fifty(make_songs):
    payload = make_songs(80)
    playlist = _client_for(lambda request: httpx.Response(200, json=payload))

    result = await playlist.load_songs("happy")

    assert len(result.songs) == 50
    assert len(set(_keys(result.songs))) == 50
    assert set(_keys(result.songs)) <= {f"{s['title']}-{s['artist']}" for s in payload}
    assert result.error is None
    assert result.from_fallback is False


async def test_small_list_is_returned_whole(make_songs):
    payload = make_songs(12)
    playlist = _client_for(lambda request: httpx.Response(200, json=payload))

    result = await playlist.load_songs("happy")

    assert sorted(_keys(result.songs)) == sorted(f"{s['title']}-{s['artist']}" for s in payload)


async def test_requests_mood_path():
    seen = []

    def handler(request):
        seen.append(request.url.path)
        return httpx.Response(200, json=[])

    await _client_for(handler).load_songs("chill")

    assert seen == ["/api/songs/chill"]


async def test_object_keyed_by_mood_is_unwrapped():
    payload = {"romantic": [{"title": "Waltz", "artist": "Pair"}]}
    playlist = _client_for(lambda request: httpx.Response(200, json=payload))

    result = await playlist.load_songs("romantic")

    assert result.songs == [SongItem(title="Waltz", artist="Pair")]


async def test_empty_array_is_success_not_fallback():
    playlist = _client_for(lambda request: httpx.Response(200, json=[]))

    result = await playlist.load_songs("sad")

    assert result.songs == []
    assert result.error is None
    assert result.from_fallback is False


async def test_network_error_falls_back_to_demo_songs():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = await _client_for(handler).load_songs("chill")

    assert result.songs == list(DEMO_SONGS)
    assert result.error == "Using demo songs."
    assert result.from_fallback is True


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404, json={"message": "mood not found"}),
        httpx.Response(500, text="boom"),
        httpx.Response(200, text="{not json"),
        httpx.Response(200, json={"unexpected": 1}),
        httpx.Response(200, json=[{"title": "No artist"}]),
    ],
)
async def test_failures_fall_back_to_demo_songs(response):
    playlist = _client_for(lambda request: response)

    result = await playlist.load_songs("happy")

    assert len(result.songs) == 5
    assert result.error == FALLBACK_MESSAGE


async def test_loads_from_catalog_service(app):
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")
    playlist = PlaylistClient("http://testserver", client=http)

    found = await playlist.load_songs("Happy")
    missing = await playlist.load_songs("unknown-mood")

    assert sorted(_keys(found.songs)) == ["Feel Good-Happy Hearts", "Sunny Days-The Vibes"]
    assert found.error is None
    assert missing.from_fallback is True


def test_demo_songs_are_fixed():
    assert _keys(DEMO_SONGS) == [
        "Sunny Days-The Vibes",
        "Feel Good-Happy Hearts",
        "Pure Joy-Mood Makers",
        "Bright Moments-Soul Collective",
        "Endless Summer-Beach Waves",
    ]


def test_extract_song_list_accepts_raw_array():
    songs = extract_song_list([{"title": "A", "artist": "B", "year": 2001}], "happy")
    assert songs == [SongItem(title="A", artist="B", year="2001")]


def test_extract_song_list_rejects_non_list():
    with pytest.raises(FetchError):
        extract_song_list({"happy": "nope"}, "happy")


def test_sample_songs_is_a_permutation_for_small_input(make_songs):
    songs = [SongItem(**s) for s in make_songs(50)]

    sampled = sample_songs(songs, 50, random.Random(7))

    assert sorted(_keys(sampled)) == sorted(_keys(songs))


def test_sample_songs_order_varies(make_songs):
    songs = [SongItem(**s) for s in make_songs(50)]

    orders = {tuple(_keys(sample_songs(songs))) for _ in range(5)}

    assert len(orders) > 1


def test_sample_songs_caps_size(make_songs):
    songs = [SongItem(**s) for s in make_songs(120)]

    assert len(sample_songs(songs, 50)) == 50
    assert len(sample_songs(songs, 10)) == 10


async def test_default_client_follows_redirects(redirecting_transport):
    seen = redirecting_transport(httpx.Response(200, json=[{"title": "Glow", "artist": "Day"}]))

    result = await PlaylistClient("http://catalog.test").load_songs("happy")

    assert seen == ["http://catalog.test/api/songs/happy", "https://catalog.test/api/songs/happy"]
    assert result.songs == [SongItem(title="Glow", artist="Day")]
    assert result.error is None
    assert result.from_fallback is False
