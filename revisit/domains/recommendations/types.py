"""추천 파이프라인 내부 타입 정의

파이프라인 1회 실행 동안만 존재하는 파생 데이터입니다.
"""

from dataclasses import dataclass, field

from revisit.domains.recommendations.schemas import RecommendationKind


@dataclass
class DomainStats:
    """도메인별 방문 통계

    Attributes:
        domain: 집계 키 (URL 호스트, 파싱 실패 시 원본 문자열)
        visit_count: 기여한 방문 기록의 visit_count 합
        last_visited_at: 가장 최근 방문 시각 (epoch ms)
        keywords: 도메인/제목에서 추출한 소문자 키워드
        representative_url: 이 도메인에서 처음 등장한 URL
    """

    domain: str
    representative_url: str
    visit_count: int = 0
    last_visited_at: int = 0
    keywords: set[str] = field(default_factory=set)


@dataclass
class FeedbackStats:
    """URL별 피드백 집계"""

    likes: int = 0
    dislikes: int = 0


@dataclass
class FeedbackAdjustment:
    """피드백 반영 결과

    Attributes:
        score: 조정된 점수 (0.0~1.0)
        reason: 추천 사유에 덧붙일 문구 (피드백 없으면 빈 문자열)
    """

    score: float
    reason: str


@dataclass
class Classification:
    """후보 분류 결과"""

    kind: RecommendationKind
    base_score: float
    base_reason: str
