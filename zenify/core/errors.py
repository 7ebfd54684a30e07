"""
Zenify Errors
도메인 예외 정의
"""


class ZenifyError(Exception):
    """Zenify 예외 베이스"""


class MoodNotFoundError(ZenifyError):
    """카탈로그에 없는 무드 요청 (HTTP 404)"""

    message = "mood not found"

    def __init__(self, mood: str):
        super().__init__(self.message)
        self.mood = mood


class CatalogLoadError(ZenifyError):
    """카탈로그 파일 로드 실패 (서비스 시작 중단)"""


class FetchError(ZenifyError):
    """클라이언트 곡 조회 실패 (네트워크, 비정상 상태 코드, 잘못된 응답)"""


class PersistenceParseError(ZenifyError):
    """로컬 저장소 값 파싱 실패"""
