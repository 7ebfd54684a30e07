"""
Zenify Preview Fetcher
iTunes Search API로 미리듣기 URL 조회 (데모용)
"""

from typing import Optional

import httpx

ITUNES_SEARCH_URL = "https://itunes.apple.com/search"


async def fetch_preview_url(term: str, client: Optional[httpx.AsyncClient] = None) -> Optional[str]:
    """
    첫 번째 검색 결과의 previewUrl

    네트워크/HTTP 오류는 그대로 전파된다.
    """
    params = {"term": term, "media": "music", "limit": 1}
    if client is not None:
        resp = await client.get(ITUNES_SEARCH_URL, params=params)
    else:
        async with httpx.AsyncClient(timeout=10, follow_redirects=True) as new_client:
            resp = await new_client.get(ITUNES_SEARCH_URL, params=params)
    resp.raise_for_status()

    results = resp.json().get("results") or []
    if not results:
        return None
    return results[0].get("previewUrl")
