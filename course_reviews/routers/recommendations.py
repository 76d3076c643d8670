from fastapi import APIRouter, Depends
from typing import Optional

from course_reviews.core.dependencies import get_recommendation_service
from course_reviews.models.recommendation import RecommendationList, StudentProfile
from course_reviews.services.recommendations import RecommendationService

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.post("", response_model=RecommendationList)
def recommend_courses(
    profile: Optional[StudentProfile] = None,
    service: RecommendationService = Depends(get_recommendation_service),
):
    return RecommendationList(recommendations=service.recommend(profile or StudentProfile()))
