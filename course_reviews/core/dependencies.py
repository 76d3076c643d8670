from fastapi import Depends

from course_reviews.core.database import get_reviews_collection
from course_reviews.services.recommendations import (
    MockRecommendationProvider,
    RecommendationProvider,
    RecommendationService,
)
from course_reviews.services.review_store import ReviewStore
from course_reviews.services.reviews import ReviewService


def get_review_store() -> ReviewStore:
    return ReviewStore(get_reviews_collection())


def get_review_service(store: ReviewStore = Depends(get_review_store)) -> ReviewService:
    return ReviewService(store)


def get_recommendation_provider() -> RecommendationProvider:
    return MockRecommendationProvider()


def get_recommendation_service(
    provider: RecommendationProvider = Depends(get_recommendation_provider),
) -> RecommendationService:
    return RecommendationService(provider)
