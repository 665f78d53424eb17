"""Recommendations API 통합 테스트"""

import pytest


async def _visit(client, url: str, times: int = 1, title: str | None = None):
    for _ in range(times):
        response = await client.post(
            "/api/v1/history", json={"url": url, "title": title}
        )
        assert response.status_code == 201


class TestGetRecommendations:
    """추천 목록 조회 API 테스트"""

    @pytest.mark.asyncio
    async def test_empty_history(self, client):
        response = await client.get("/api/v1/recommendations")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"] == []

    @pytest.mark.asyncio
    async def test_frequent_site_is_recommended(self, client):
        """자주 방문한 사이트는 favorite으로 추천"""
        await _visit(client, "https://a.com", times=3, title="A Site")

        response = await client.get("/api/v1/recommendations")

        assert response.status_code == 200
        items = response.json()["data"]
        assert len(items) == 1
        assert items[0]["url"] == "https://a.com"
        assert items[0]["title"] == "a.com"
        assert items[0]["kind"] == "favorite"
        assert items[0]["score"] == pytest.approx(1.0)
        assert set(items[0]["component_scores"]) == {
            "frequency",
            "recency",
            "feedback",
            "combined",
        }

    @pytest.mark.asyncio
    async def test_limit_query(self, client):
        for i in range(4):
            await _visit(client, f"https://site{i}.com")

        response = await client.get("/api/v1/recommendations?limit=2")

        assert response.status_code == 200
        assert len(response.json()["data"]) == 2

    @pytest.mark.asyncio
    async def test_invalid_limit(self, client):
        response = await client.get("/api/v1/recommendations?limit=0")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_feedback_changes_reason_after_cache_clear(self, client):
        """피드백은 캐시 삭제 후 다음 계산에 반영"""
        await _visit(client, "https://a.com", times=2)
        await client.get("/api/v1/recommendations")

        for _ in range(2):
            await client.post(
                "/api/v1/feedback",
                json={"url": "https://a.com", "value": "dislike"},
            )

        cached = await client.get("/api/v1/recommendations")
        assert "Muting" not in cached.json()["data"][0]["reason"]

        response = await client.delete("/api/v1/recommendations/cache")
        assert response.status_code == 200

        fresh = await client.get("/api/v1/recommendations")
        item = fresh.json()["data"][0]
        assert "(Muting similar sites)" in item["reason"]
        assert item["score"] == pytest.approx(0.06)
