"""
Zenify Mood Catalog
무드별 곡 카탈로그 (읽기 전용)
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from ..schemas.songs import SongItem
from .errors import MoodNotFoundError


class Catalog:
    """
    무드 -> 곡 목록 매핑

    서비스 시작 시 한 번 만들어져 라우터에 주입되며, 이후 변경되지 않는다.
    조회 시 무드는 소문자로만 변환한다 (공백 제거 없음).
    """

    def __init__(self, songs_by_mood: Mapping[str, Iterable[SongItem]]):
        self._songs: Mapping[str, Tuple[SongItem, ...]] = MappingProxyType(
            {mood: tuple(songs) for mood, songs in songs_by_mood.items()}
        )

    @property
    def moods(self) -> Tuple[str, ...]:
        return tuple(self._songs.keys())

    @property
    def song_count(self) -> int:
        return sum(len(songs) for songs in self._songs.values())

    def list_all(self) -> Mapping[str, Tuple[SongItem, ...]]:
        """전체 카탈로그 (필터링 없음)"""
        return self._songs

    def list_by_mood(self, mood: str) -> Tuple[SongItem, ...]:
        """
        무드별 곡 목록 조회

        Args:
            mood: 무드 이름 (대소문자 무시)

        Returns:
            저장된 순서 그대로의 곡 목록 (셔플/자르기 없음)

        Raises:
            MoodNotFoundError: 카탈로그에 없는 무드
        """
        key = mood.lower()
        songs = self._songs.get(key)
        if songs is None:
            raise MoodNotFoundError(mood)
        return songs
