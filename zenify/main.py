"""
Zenify Backend Main Application
FastAPI 앱 및 startup/shutdown 이벤트
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.catalog import Catalog
from .core.config import get_settings, Settings
from .core.errors import MoodNotFoundError
from .core.loaders import load_catalog
from .api import routes_health, routes_songs
from .schemas.common import ErrorResponse
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 라이프사이클 관리"""
    # Startup
    config = app.state.config
    logger.info("=" * 60)
    logger.info(f"{config.APP_NAME} Backend Starting...")
    logger.info("=" * 60)

    # 주입된 카탈로그가 없을 때만 로드 (CatalogLoadError는 시작 중단)
    if app.state.catalog is None:
        app.state.catalog = load_catalog(config.CATALOG_PATH)
    else:
        logger.info("Using injected catalog")

    logger.info(f"Moods: {', '.join(app.state.catalog.moods)}")
    logger.info(f"{config.APP_NAME} Backend Ready!")

    yield

    # Shutdown
    logger.info(f"{config.APP_NAME} Backend Shutting down...")


async def mood_not_found_handler(request: Request, exc: MoodNotFoundError) -> JSONResponse:
    logger.info(f"Mood not found: {exc.mood!r}")
    body = ErrorResponse(message=exc.message)
    return JSONResponse(status_code=404, content=body.model_dump(exclude_none=True))


def create_app(catalog: Optional[Catalog] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    FastAPI 앱 생성

    Args:
        catalog: 주입할 카탈로그 (None이면 startup 시 설정에서 로드)
        settings: 설정 (None이면 환경변수에서 로드)
    """
    config = settings or get_settings()
    setup_logging(config.LOG_LEVEL)

    app = FastAPI(
        title=f"{config.APP_NAME} API",
        description="무드 기반 음악 추천 API",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.config = config
    app.state.catalog = catalog

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MoodNotFoundError, mood_not_found_handler)

    # 라우터 등록
    app.include_router(routes_health.router)
    app.include_router(routes_songs.router)

    return app


app = create_app()


def run() -> None:
    """uvicorn 서버 실행"""
    config = app.state.config
    logger.info(f"Server running on http://localhost:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
