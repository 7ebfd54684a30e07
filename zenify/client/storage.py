"""
Zenify Local Storage
클라이언트 로컬 저장소 (메모리 / JSON 파일 / Redis)

브라우저 localStorage처럼 문자열 키-값만 다루며, 쓰기 실패는 로그만 남기고
재시도하거나 예외를 올리지 않는다.
"""

from abc import ABC, abstractmethod
import json
import logging
from pathlib import Path
from typing import Dict, Optional

import redis

from ..core.config import Settings

logger = logging.getLogger(__name__)


class LocalStorage(ABC):
    """저장소 인터페이스 (문자열 키-값)"""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """없으면 None"""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...


class MemoryStorage(LocalStorage):
    """프로세스 메모리 저장소 (테스트, 임시 세션용)"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage(LocalStorage):
    """
    JSON 파일 저장소

    파일 하나에 전체 키-값 객체를 저장한다. 파일이 깨져 있으면 빈 상태로 시작한다.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._items: Dict[str, str] = self._read()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"저장소 파일 읽기 실패 (빈 상태로 시작): {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"저장소 파일 형식 오류 (빈 상태로 시작): {self.path}")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._items, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.warning(f"저장소 파일 쓰기 실패: {self.path}: {e}")

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._flush()


class RedisStorage(LocalStorage):
    """Redis 저장소 (연결 실패 시 아무것도 저장하지 않음)"""

    def __init__(self, redis_url: str, prefix: str = "zenify:", client: Optional[redis.Redis] = None):
        """
        Args:
            redis_url: Redis 연결 URL (예: redis://localhost:6379/0)
            prefix: 키 접두사
            client: 이미 만들어진 클라이언트 (주로 테스트용)
        """
        self.redis_url = redis_url
        self.prefix = prefix
        self._client: Optional[redis.Redis] = client
        if self._client is None:
            self._connect()

    def _connect(self) -> None:
        """Redis 연결 시도"""
        try:
            self._client = redis.from_url(
                self.redis_url,
                decode_responses=True,
                socket_connect_timeout=2,
                socket_timeout=2
            )
            self._client.ping()
            logger.info(f"Redis 연결 성공: {self.redis_url}")
        except (redis.RedisError, ValueError) as e:
            logger.warning(f"Redis 연결 실패 (저장 없이 진행): {e}")
            self._client = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get_item(self, key: str) -> Optional[str]:
        if self._client is None:
            return None
        try:
            return self._client.get(self._key(key))
        except redis.RedisError as e:
            logger.warning(f"Redis 조회 실패: {e}")
            return None

    def set_item(self, key: str, value: str) -> None:
        if self._client is None:
            return
        try:
            self._client.set(self._key(key), value)
        except redis.RedisError as e:
            logger.warning(f"Redis 저장 실패: {e}")

    def remove_item(self, key: str) -> None:
        if self._client is None:
            return
        try:
            self._client.delete(self._key(key))
        except redis.RedisError as e:
            logger.warning(f"Redis 삭제 실패: {e}")


def open_storage(settings: Settings) -> LocalStorage:
    """설정의 STORAGE_BACKEND에 따라 저장소 생성"""
    if settings.STORAGE_BACKEND == "redis":
        return RedisStorage(settings.REDIS_URL, prefix=settings.STORAGE_PREFIX)
    if settings.STORAGE_BACKEND == "file":
        return JsonFileStorage(settings.STORAGE_PATH)
    return MemoryStorage()
