"""
Zenify Like-State Manager
좋아요 곡 집합 관리 및 로컬 저장
"""

import json
import logging
from typing import Dict, Iterable, List, Optional

from ..core.errors import PersistenceParseError
from ..schemas.songs import SongItem
from .storage import LocalStorage

logger = logging.getLogger(__name__)

LIKED_SONGS_KEY = "likedSongs"


def song_key(song: SongItem) -> str:
    """좋아요 추적용 키 (title-artist, 같은 제목/아티스트는 충돌 허용)"""
    return song.key


def decode_liked_songs(raw: Optional[str]) -> Dict[str, bool]:
    """
    저장된 JSON 문자열을 좋아요 집합으로 변환

    Raises:
        PersistenceParseError: JSON 파싱 실패 또는 객체가 아닌 값
    """
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise PersistenceParseError(f"{LIKED_SONGS_KEY} 파싱 실패: {e}") from e
    if not isinstance(data, dict):
        raise PersistenceParseError(f"{LIKED_SONGS_KEY} 값이 객체가 아님: {type(data).__name__}")
    # false는 저장하지 않는다: 참인 항목만 유지
    return {str(key): True for key, value in data.items() if value}


class LikeStateManager:
    """
    좋아요 집합 (song_key -> True)

    키가 없으면 좋아요 아님. 토글할 때마다 전체 집합을 저장소에 다시 쓴다.
    """

    def __init__(self, storage: LocalStorage):
        self.storage = storage
        self._liked: Dict[str, bool] = self._load()

    def _load(self) -> Dict[str, bool]:
        try:
            return decode_liked_songs(self.storage.get_item(LIKED_SONGS_KEY))
        except PersistenceParseError as e:
            logger.warning(f"좋아요 목록 초기화: {e}")
            return {}

    def _persist(self) -> None:
        self.storage.set_item(LIKED_SONGS_KEY, json.dumps(self._liked, ensure_ascii=False))

    @property
    def liked_songs(self) -> Dict[str, bool]:
        return dict(self._liked)

    @property
    def count(self) -> int:
        return len(self._liked)

    def toggle_like(self, key: str) -> bool:
        """
        좋아요 토글

        Returns:
            토글 후 좋아요 여부
        """
        if key in self._liked:
            del self._liked[key]
            liked = False
        else:
            self._liked[key] = True
            liked = True
        self._persist()
        return liked

    def is_liked(self, key: str) -> bool:
        return key in self._liked

    def filter_liked(self, songs: Iterable[SongItem]) -> List[SongItem]:
        """좋아요한 곡만 원래 순서대로"""
        return [song for song in songs if song_key(song) in self._liked]
