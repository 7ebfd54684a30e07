"""
Zenify Song Schemas
곡 관련 스키마
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class SongItem(BaseModel):
    """곡 정보"""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    title: str
    artist: str
    year: Optional[str] = None
    duration: Optional[str] = None

    @property
    def key(self) -> str:
        """좋아요 추적용 키 (title-artist)"""
        return f"{self.title}-{self.artist}"


# 무드 -> 곡 목록 전체 덤프
CatalogResponse = Dict[str, List[SongItem]]
