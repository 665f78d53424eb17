"""Personalization API 통합 테스트"""

import pytest


class TestPersonalizationAPI:
    """개인화 설정 API 테스트"""

    @pytest.mark.asyncio
    async def test_get_defaults(self, client):
        response = await client.get("/api/v1/personalization")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data == {
            "recency_weight": 0.5,
            "frequency_weight": 0.3,
            "feedback_weight": 0.2,
            "min_score": 0.1,
            "max_recommendations": 5,
        }

    @pytest.mark.asyncio
    async def test_update_normalizes_weights(self, client):
        response = await client.put(
            "/api/v1/personalization",
            json={"recency_weight": 1.0, "max_recommendations": 10},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        total = (
            data["recency_weight"]
            + data["frequency_weight"]
            + data["feedback_weight"]
        )
        assert total == pytest.approx(1.0)
        assert data["max_recommendations"] == 10

    @pytest.mark.asyncio
    async def test_invalid_update_returns_400(self, client):
        """범위를 벗어난 값은 400 에러"""
        response = await client.put(
            "/api/v1/personalization", json={"min_score": 2}
        )

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "INVALID_PERSONALIZATION_SETTINGS"
        assert data["error"]["detail"] == {
            "errors": ["min_score must be between 0 and 1"]
        }

    @pytest.mark.asyncio
    async def test_update_clears_recommendation_cache(self, client, container):
        """설정 변경 시 추천 캐시 무효화"""
        await client.post("/api/v1/history", json={"url": "https://a.com"})
        await client.get("/api/v1/recommendations")
        assert container.recommendation_service.cache.entry is not None

        await client.put("/api/v1/personalization", json={"min_score": 0.2})

        assert container.recommendation_service.cache.entry is None

    @pytest.mark.asyncio
    async def test_reset(self, client):
        await client.put("/api/v1/personalization", json={"min_score": 0.7})

        response = await client.post("/api/v1/personalization/reset")

        assert response.status_code == 200
        assert response.json()["data"]["min_score"] == 0.1
