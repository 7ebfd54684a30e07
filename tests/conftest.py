import httpx
import pytest
from fastapi.testclient import TestClient

from zenify.core.config import Settings
from zenify.core.loaders import build_catalog
from zenify.main import create_app
from zenify.client.storage import MemoryStorage


FIXTURE_SONGS = {
    "happy": [
        {"title": "Sunny Days", "artist": "The Vibes", "year": "2023", "duration": "3:45"},
        {"title": "Feel Good", "artist": "Happy Hearts", "year": 2022},
    ],
    "sad": [],
    "Chill": [
        {"title": "Slow Tide", "artist": "Low Sun"},
    ],
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(STORAGE_BACKEND="memory", LOG_LEVEL="DEBUG", API_BASE_URL="http://testserver")


@pytest.fixture
def catalog():
    return build_catalog(FIXTURE_SONGS)


@pytest.fixture
def app(catalog, settings):
    return create_app(catalog=catalog, settings=settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def make_songs():
    """title/artist가 모두 다른 곡 레코드 n개를 만드는 함수"""
    def factory(n, prefix="Song"):
        return [{"title": f"{prefix} {i}", "artist": f"Artist {i}"} for i in range(n)]
    return factory


@pytest.fixture
def redirecting_transport(monkeypatch):
    """
    클라이언트 내부에서 만드는 httpx.AsyncClient를 가짜 전송으로 바꾸는 함수

    http 요청은 같은 주소의 https로 301, https 요청은 주어진 응답을 돌려준다.
    timeout, follow_redirects 등 옵션은 코드가 넘긴 그대로 유지되며,
    받은 요청 URL을 순서대로 기록한 리스트를 반환한다.
    """
    real_client = httpx.AsyncClient
    seen = []

    def install(response):
        def handler(request):
            seen.append(str(request.url))
            if request.url.scheme == "http":
                return httpx.Response(301, headers={"Location": str(request.url.copy_with(scheme="https"))})
            return response

        def client_with_transport(**kwargs):
            return real_client(transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", client_with_transport)
        return seen

    return install
