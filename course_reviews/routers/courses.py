from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from course_reviews.core.dependencies import get_recommendation_service, get_review_service
from course_reviews.models.recommendation import CourseDetails, CourseSearchResult
from course_reviews.models.review import CourseStats
from course_reviews.services.recommendations import RecommendationService
from course_reviews.services.reviews import ReviewService

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("/search", response_model=CourseSearchResult)
def search_courses(
    q: Optional[str] = Query(None),
    service: RecommendationService = Depends(get_recommendation_service),
):
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="q is required")
    return CourseSearchResult(courses=service.search(q.strip()))


@router.get("/{course_code}/stats", response_model=CourseStats)
def get_course_stats(course_code: str, service: ReviewService = Depends(get_review_service)):
    """Rating breakdown recomputed from every review of the course."""
    if not course_code.strip():
        raise HTTPException(status_code=400, detail="courseCode is required")
    return service.course_stats(course_code.strip())


@router.get("/{course_code}", response_model=CourseDetails)
def get_course(
    course_code: str,
    service: RecommendationService = Depends(get_recommendation_service),
):
    details = service.course_details(course_code)
    if details is None:
        raise HTTPException(status_code=404, detail="Course not found")
    return details
