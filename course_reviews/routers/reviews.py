from fastapi import APIRouter, Body, Depends, HTTPException, Query
from typing import Any, Dict, Optional

from course_reviews.core.dependencies import get_review_service
from course_reviews.models.review import (
    HelpfulVoteResponse,
    ReportResponse,
    ReviewList,
    SubmitReviewResponse,
)
from course_reviews.services.reviews import ReviewService

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


def _require_review_id(review_id: str) -> str:
    if not review_id.strip():
        raise HTTPException(status_code=400, detail="reviewId is required")
    return review_id


@router.get("", response_model=ReviewList)
def get_reviews(
    course_code: Optional[str] = Query(None, alias="courseCode"),
    service: ReviewService = Depends(get_review_service),
):
    """All reviews for a course, most helpful first, with the average rating."""
    if not course_code or not course_code.strip():
        raise HTTPException(status_code=400, detail="courseCode is required")
    return service.list_reviews(course_code.strip())


@router.post("", response_model=SubmitReviewResponse, status_code=201)
def submit_review(
    submission: Dict[str, Any] = Body(...),
    service: ReviewService = Depends(get_review_service),
):
    review_id = service.submit_review(submission)
    return SubmitReviewResponse(review_id=review_id)


@router.put("/{review_id}/helpful", response_model=HelpfulVoteResponse)
def upvote_review(review_id: str, service: ReviewService = Depends(get_review_service)):
    review = service.mark_helpful(_require_review_id(review_id))
    return HelpfulVoteResponse(helpful_votes=review.helpful_votes, total_votes=review.total_votes)


@router.put("/{review_id}/report", response_model=ReportResponse)
def report_review(review_id: str, service: ReviewService = Depends(get_review_service)):
    service.report_review(_require_review_id(review_id))
    return ReportResponse()
