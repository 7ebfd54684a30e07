"""
Zenify Session
화면 상태 + 사용자 액션 (selectMood, toggleLike, toggleTheme, toggleShowLikedOnly)

렌더링 레이어는 이 객체의 속성만 읽고 액션 메서드만 호출한다.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from ..core.config import Settings
from ..schemas.songs import SongItem
from .likes import LikeStateManager, song_key
from .playlist import PlaylistClient
from .storage import LocalStorage, open_storage
from .theme import ThemeManager, Theme

logger = logging.getLogger(__name__)

NO_LIKED_SONGS_MESSAGE = "No liked songs yet. Start exploring!"
NO_SONGS_MESSAGE = "No songs found for this mood"


@dataclass(frozen=True)
class SiteConfig:
    """화면 문구"""
    site_title: str = "Zenify"
    tagline: str = "Discover music that matches your soul"
    no_mood_message: str = "Select a mood to discover your perfect playlist"


class Session:
    """한 사용자의 화면 상태"""

    def __init__(
        self,
        playlist: PlaylistClient,
        storage: LocalStorage,
        site: Optional[SiteConfig] = None
    ):
        self.playlist = playlist
        self.site = site or SiteConfig()
        self.likes = LikeStateManager(storage)
        self.themes = ThemeManager(storage)

        self.current_mood: Optional[str] = None
        self.songs: List[SongItem] = []
        self.is_loading = False
        self.error: Optional[str] = None
        self.show_liked_only = False

        # 무드 선택마다 증가, 늦게 도착한 이전 응답은 버린다
        self._generation = 0

    @classmethod
    def from_settings(cls, settings: Settings, storage: Optional[LocalStorage] = None) -> "Session":
        playlist = PlaylistClient(
            settings.API_BASE_URL,
            sample_size=settings.SAMPLE_SIZE,
            timeout=settings.REQUEST_TIMEOUT_SEC
        )
        return cls(playlist, storage if storage is not None else open_storage(settings))

    @property
    def theme(self) -> Theme:
        return self.themes.theme

    @property
    def liked_songs(self) -> Dict[str, bool]:
        return self.likes.liked_songs

    @property
    def displayed_songs(self) -> List[SongItem]:
        if self.show_liked_only:
            return self.likes.filter_liked(self.songs)
        return list(self.songs)

    @property
    def status_message(self) -> Optional[str]:
        """빈 화면 안내 문구 (보여줄 곡이 있으면 None)"""
        if self.is_loading:
            return None
        if self.show_liked_only:
            return NO_LIKED_SONGS_MESSAGE if not self.displayed_songs else None
        if self.current_mood is None:
            return self.site.no_mood_message
        if not self.displayed_songs:
            return NO_SONGS_MESSAGE
        return None

    async def select_mood(self, mood: str) -> None:
        """무드 선택: 상태 초기화 -> 조회 -> 결과 또는 데모 곡 반영"""
        if not mood:
            return

        self._generation += 1
        generation = self._generation

        self.current_mood = mood
        self.is_loading = True
        self.error = None
        self.songs = []

        try:
            result = await self.playlist.load_songs(mood)
        finally:
            # 취소되어도 로딩 상태는 해제 (최신 요청만)
            if generation == self._generation:
                self.is_loading = False

        if generation != self._generation:
            logger.debug(f"이전 요청 결과 무시 (mood={mood})")
            return

        self.songs = result.songs
        self.error = result.error

    def toggle_like(self, song: Union[SongItem, str]) -> bool:
        key = song if isinstance(song, str) else song_key(song)
        return self.likes.toggle_like(key)

    def toggle_theme(self) -> Theme:
        return self.themes.toggle_theme()

    def toggle_show_liked_only(self) -> bool:
        self.show_liked_only = not self.show_liked_only
        return self.show_liked_only
