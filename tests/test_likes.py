import json

import pytest

from zenify.client.likes import LIKED_SONGS_KEY, LikeStateManager, decode_liked_songs, song_key
from zenify.client.storage import MemoryStorage
from zenify.core.errors import PersistenceParseError
from zenify.schemas.songs import SongItem

SUNNY = SongItem(title="Sunny Days", artist="The Vibes", year="2023", duration="3:45")
FEEL = SongItem(title="Feel Good", artist="Happy Hearts")


def test_song_key_joins_title_and_artist():
    assert song_key(SUNNY) == "Sunny Days-The Vibes"


def test_toggle_adds_then_removes(storage):
    likes = LikeStateManager(storage)

    assert likes.toggle_like("Sunny Days-The Vibes") is True
    assert likes.is_liked("Sunny Days-The Vibes")
    assert likes.toggle_like("Sunny Days-The Vibes") is False
    assert not likes.is_liked("Sunny Days-The Vibes")
    assert likes.liked_songs == {}


def test_double_toggle_restores_original_state():
    storage = MemoryStorage({LIKED_SONGS_KEY: json.dumps({"Feel Good-Happy Hearts": True})})
    likes = LikeStateManager(storage)
    before = likes.liked_songs

    likes.toggle_like("Sunny Days-The Vibes")
    likes.toggle_like("Sunny Days-The Vibes")

    assert likes.liked_songs == before
    assert json.loads(storage.get_item(LIKED_SONGS_KEY)) == before


def test_every_toggle_writes_full_set(storage):
    likes = LikeStateManager(storage)

    likes.toggle_like("a-1")
    likes.toggle_like("b-2")
    assert json.loads(storage.get_item(LIKED_SONGS_KEY)) == {"a-1": True, "b-2": True}

    likes.toggle_like("a-1")
    assert json.loads(storage.get_item(LIKED_SONGS_KEY)) == {"b-2": True}


def test_likes_survive_new_manager(storage):
    LikeStateManager(storage).toggle_like("Sunny Days-The Vibes")

    assert LikeStateManager(storage).is_liked("Sunny Days-The Vibes")


def test_filter_liked_returns_matching_song(storage):
    likes = LikeStateManager(storage)
    likes.toggle_like("Sunny Days-The Vibes")

    assert likes.filter_liked([FEEL, SUNNY]) == [SUNNY]


def test_filter_liked_keeps_order(storage):
    likes = LikeStateManager(storage)
    songs = [SongItem(title=f"T{i}", artist="A") for i in range(5)]
    for song in (songs[3], songs[0], songs[4]):
        likes.toggle_like(song.key)

    assert likes.filter_liked(songs) == [songs[0], songs[3], songs[4]]


@pytest.mark.parametrize("raw", ["{not json", "[1, 2]", "\"text\"", "42"])
def test_corrupted_storage_starts_empty(raw):
    likes = LikeStateManager(MemoryStorage({LIKED_SONGS_KEY: raw}))

    assert likes.liked_songs == {}
    assert likes.count == 0


def test_false_entries_are_dropped():
    raw = json.dumps({"a-1": True, "b-2": False})
    assert decode_liked_songs(raw) == {"a-1": True}


def test_decode_raises_parse_error():
    with pytest.raises(PersistenceParseError):
        decode_liked_songs("{not json")


def test_decode_missing_value():
    assert decode_liked_songs(None) == {}
