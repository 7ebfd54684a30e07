"""
Zenify Catalog Loaders
내장 곡 데이터 / JSON 파일에서 카탈로그 로드
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..schemas.songs import SongItem
from ..utils.timing import Timer
from .catalog import Catalog
from .errors import CatalogLoadError
from .songs_data import SONGS

logger = logging.getLogger(__name__)


def _extract_field(item: Dict, candidates: List[str], default: str = "") -> str:
    """여러 후보 키에서 필드 추출"""
    for key in candidates:
        if key in item:
            val = item[key]
            if isinstance(val, list):
                return ", ".join(str(v) for v in val)
            return str(val) if val else default
    return default


def _parse_song(item: Any) -> Optional[SongItem]:
    """곡 레코드 파싱 (title/artist 없으면 None)"""
    if not isinstance(item, dict):
        return None

    title = _extract_field(item, ["title", "song_name", "name"])
    artist = _extract_field(item, ["artist", "artist_name", "artists"])
    if not title or not artist:
        return None

    year = _extract_field(item, ["year", "issue_year"]) or None
    duration = _extract_field(item, ["duration"]) or None
    return SongItem(title=title, artist=artist, year=year, duration=duration)


def build_catalog(data: Mapping[str, Any]) -> Catalog:
    """
    {mood: [song, ...]} 매핑으로 카탈로그 생성

    무드 키는 소문자로 정규화하고, 잘못된 곡 레코드는 경고 후 건너뛴다.
    """
    songs_by_mood: Dict[str, List[SongItem]] = {}

    for mood, items in data.items():
        key = str(mood).lower()
        if not isinstance(items, list):
            logger.warning(f"무드 '{mood}' 곡 목록이 리스트가 아님 (스킵)")
            continue

        songs = songs_by_mood.setdefault(key, [])
        for item in items:
            song = _parse_song(item)
            if song is None:
                logger.warning(f"잘못된 곡 레코드 스킵 ({key}): {item!r}")
                continue
            songs.append(song)

    return Catalog(songs_by_mood)


def load_catalog(path: str = "") -> Catalog:
    """
    카탈로그 로드

    Args:
        path: JSON 파일 경로 (비어 있으면 내장 데이터 사용)

    Returns:
        Catalog

    Raises:
        CatalogLoadError: 파일이 없거나 읽을 수 없는 경우
    """
    with Timer("load_catalog", source=path or "builtin") as timer:
        if not path:
            catalog = build_catalog(SONGS)
            timer.fields["songs"] = catalog.song_count
            logger.info(f"내장 카탈로그 로드 완료: {len(catalog.moods)}개 무드, {catalog.song_count}곡")
            return catalog

        file_path = Path(path)
        if not file_path.exists():
            raise CatalogLoadError(f"카탈로그 파일 없음: {file_path}")

        try:
            logger.info(f"카탈로그 로드 중: {file_path}")
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogLoadError(f"카탈로그 로드 실패: {e}") from e

        if not isinstance(data, dict):
            raise CatalogLoadError(f"카탈로그 형식 오류 (객체가 아님): {file_path}")

        catalog = build_catalog(data)
        timer.fields["songs"] = catalog.song_count
        logger.info(f"카탈로그 로드 완료: {len(catalog.moods)}개 무드, {catalog.song_count}곡")
        return catalog
