"""
Zenify Timing Utilities
시간 측정 유틸리티
"""

import time
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class Timer:
    """
    컨텍스트 매니저 타이머

    생성 시 넘긴 필드(mood 등)와 블록 안에서 채운 fields(songs 등)를
    경과 시간과 함께 debug 로그로 남긴다.
        with Timer("load_songs", mood="happy") as timer:
            timer.fields["songs"] = 12
    """

    def __init__(self, name: str = "", **fields: Any):
        self.name = name
        self.fields: Dict[str, Any] = dict(fields)
        self.elapsed: float = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self.elapsed = time.perf_counter() - self._start
        if self.name:
            logger.debug(f"{self.describe()} took {self.elapsed:.4f}s")

    def describe(self) -> str:
        """'name key=value ...' 형태의 로그 문구"""
        parts = [self.name] + [f"{key}={value}" for key, value in self.fields.items()]
        return " ".join(parts)
