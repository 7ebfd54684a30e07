"""
Zenify Songs API
무드별 곡 조회 라우터
"""

import logging
from typing import List

from fastapi import APIRouter, Request, HTTPException

from ..core.catalog import Catalog
from ..schemas.common import ErrorResponse
from ..schemas.songs import SongItem, CatalogResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["songs"])


def _get_catalog(request: Request) -> Catalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=503, detail="catalog not loaded")
    return catalog


@router.get(
    "/songs",
    response_model=CatalogResponse,
    response_model_exclude_none=True
)
async def list_songs(request: Request) -> CatalogResponse:
    """전체 카탈로그 (무드 -> 곡 목록)"""
    catalog = _get_catalog(request)
    return {mood: list(songs) for mood, songs in catalog.list_all().items()}


@router.get(
    "/songs/{mood}",
    response_model=List[SongItem],
    response_model_exclude_none=True,
    responses={
        404: {"model": ErrorResponse, "description": "Mood not found"},
        503: {"description": "Catalog not loaded"}
    }
)
async def list_songs_by_mood(request: Request, mood: str) -> List[SongItem]:
    """
    무드별 곡 목록

    - mood: 무드 이름 (소문자로 변환 후 조회, 공백은 그대로)

    없는 무드는 MoodNotFoundError -> 404 {"message": "mood not found"}
    """
    catalog = _get_catalog(request)
    songs = catalog.list_by_mood(mood)
    logger.debug(f"mood={mood.lower()} songs={len(songs)}")
    return list(songs)
