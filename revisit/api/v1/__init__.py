"""API v1 라우터"""

from typing import Any

from fastapi import APIRouter

from revisit.core.schemas import APIResponse, create_response
from revisit.domains.feedback.router import router as feedback_router
from revisit.domains.history.router import router as history_router
from revisit.domains.personalization.router import (
    router as personalization_router,
)
from revisit.domains.recommendations.router import (
    router as recommendations_router,
)

api_router = APIRouter()

# (prefix, router, tag)
DOMAIN_ROUTERS = [
    ("/recommendations", recommendations_router, "Recommendations"),
    ("/history", history_router, "History"),
    ("/feedback", feedback_router, "Feedback"),
    ("/personalization", personalization_router, "Personalization"),
]

for prefix, domain_router, tag in DOMAIN_ROUTERS:
    api_router.include_router(domain_router, prefix=prefix, tags=[tag])


@api_router.get("/", response_model=APIResponse[dict[str, Any]])
async def api_v1_root():
    """API v1 루트 엔드포인트"""
    return create_response(
        data={
            "version": "1.0.0",
            "docs": "/docs",
            "resources": [prefix for prefix, _, _ in DOMAIN_ROUTERS],
        },
        message="Revisit API v1",
    )
