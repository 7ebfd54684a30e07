"""
Zenify Health Check API
헬스 체크 라우터
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    service: str
    catalog_loaded: bool
    mood_count: int
    song_count: int


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """루트 엔드포인트 (liveness)"""
    return "API is running"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    서버 상태 확인

    - 카탈로그 로드 여부
    - 무드 / 곡 개수
    """
    state = request.app.state
    catalog = getattr(state, "catalog", None)

    if catalog is not None:
        status = "ok"
        mood_count = len(catalog.moods)
        song_count = catalog.song_count
    else:
        status = "degraded"
        mood_count = 0
        song_count = 0

    return HealthResponse(
        status=status,
        service=state.config.APP_NAME,
        catalog_loaded=catalog is not None,
        mood_count=mood_count,
        song_count=song_count
    )
