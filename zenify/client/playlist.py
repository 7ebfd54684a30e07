"""
Zenify Playlist Client
카탈로그 API 조회 + 랜덤 샘플링 + 데모 곡 폴백
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

import httpx
from pydantic import ValidationError

from ..core.errors import FetchError
from ..schemas.songs import SongItem
from ..utils.timing import Timer

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 50
FALLBACK_MESSAGE = "Using demo songs."

DEMO_SONGS = (
    SongItem(title="Sunny Days", artist="The Vibes", year="2023", duration="3:45"),
    SongItem(title="Feel Good", artist="Happy Hearts", year="2022", duration="4:12"),
    SongItem(title="Pure Joy", artist="Mood Makers", year="2024", duration="3:28"),
    SongItem(title="Bright Moments", artist="Soul Collective", year="2023", duration="3:55"),
    SongItem(title="Endless Summer", artist="Beach Waves", year="2023", duration="4:01"),
)


@dataclass
class LoadResult:
    """곡 조회 결과"""
    songs: List[SongItem] = field(default_factory=list)
    error: Optional[str] = None  # 안내 메시지 (폴백 시 "Using demo songs.")
    from_fallback: bool = False


def extract_song_list(payload: Any, mood: str) -> List[SongItem]:
    """
    응답에서 곡 목록 추출

    - 배열이면 그대로
    - {mood: [...]} 객체면 해당 무드 배열
    - 그 외에는 응답 그대로 (배열이 아니면 FetchError)
    """
    if isinstance(payload, list):
        candidates = payload
    elif isinstance(payload, dict) and isinstance(payload.get(mood), list):
        candidates = payload[mood]
    else:
        candidates = payload

    if not isinstance(candidates, list):
        raise FetchError(f"곡 목록이 배열이 아님: {type(candidates).__name__}")

    try:
        return [SongItem.model_validate(item) for item in candidates]
    except ValidationError as e:
        raise FetchError(f"잘못된 곡 레코드: {e.error_count()}개 오류") from e


def sample_songs(
    songs: Sequence[SongItem],
    limit: int = DEFAULT_SAMPLE_SIZE,
    rng: Optional[random.Random] = None
) -> List[SongItem]:
    """랜덤 순열 후 최대 limit곡 (limit 이하면 전체를 섞어서 반환)"""
    rng = rng or random.Random()
    return rng.sample(list(songs), min(len(songs), limit))


class PlaylistClient:
    """무드별 곡 조회 클라이언트"""

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        timeout: float = 10.0,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            base_url: 카탈로그 API 주소
            client: 공유 httpx 클라이언트 (None이면 요청마다 생성)
            sample_size: 최대 표시 곡 수
            timeout: 요청 타임아웃 (초)
            rng: 샘플링용 난수 생성기 (테스트용, 기본은 시드 없음)
        """
        self.base_url = base_url.rstrip("/")
        self.client = client
        self.sample_size = sample_size
        self.timeout = timeout
        self.rng = rng or random.Random()

    def _songs_url(self, mood: str) -> str:
        return f"{self.base_url}/api/songs/{mood}"

    async def _get(self, url: str) -> httpx.Response:
        if self.client is not None:
            return await self.client.get(url)
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            return await client.get(url)

    async def fetch_songs(self, mood: str) -> List[SongItem]:
        """
        API 조회 (샘플링 전)

        Raises:
            FetchError: 네트워크 오류, 2xx 아닌 응답, 잘못된 JSON/형식
        """
        try:
            resp = await self._get(self._songs_url(mood))
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"API error: {e}") from e
        except ValueError as e:
            raise FetchError(f"잘못된 JSON 응답: {e}") from e
        return extract_song_list(payload, mood)

    async def load_songs(self, mood: str) -> LoadResult:
        """
        무드별 곡 로드

        성공하면 최대 sample_size곡을 랜덤 샘플링하고, 실패하면 데모 곡 5개와
        안내 메시지를 돌려준다. 빈 배열은 실패가 아니다.
        """
        with Timer("load_songs", mood=mood) as timer:
            try:
                songs = await self.fetch_songs(mood)
            except FetchError as e:
                timer.fields["fallback"] = True
                logger.warning(f"곡 조회 실패, 데모 곡 사용 (mood={mood}): {e}")
                return LoadResult(songs=list(DEMO_SONGS), error=FALLBACK_MESSAGE, from_fallback=True)
            timer.fields["songs"] = len(songs)

        sampled = sample_songs(songs, self.sample_size, self.rng)
        logger.info(f"mood={mood} 후보 {len(songs)}곡 중 {len(sampled)}곡 표시")
        return LoadResult(songs=sampled)
