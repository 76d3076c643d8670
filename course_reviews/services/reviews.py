"""Review operations behind the HTTP handlers."""

import logging
from typing import Any, Mapping

from course_reviews.models.review import CourseStats, Review, ReviewList
from course_reviews.utils.aggregation import average_rating, compute_course_stats
from course_reviews.utils.normalize import normalize_submission
from course_reviews.utils.validation import validate_submission

from .review_store import ReviewStore

log = logging.getLogger(__name__)


class ReviewService:
    def __init__(self, store: ReviewStore):
        self.store = store

    def list_reviews(self, course_code: str) -> ReviewList:
        reviews = self.store.find_by_course(course_code)
        return ReviewList(
            reviews=reviews,
            average_rating=average_rating(reviews),
            total_reviews=len(reviews),
        )

    def submit_review(self, submission: Mapping[str, Any]) -> str:
        validate_submission(submission)
        review = normalize_submission(submission)
        review_id = self.store.insert(review)
        log.info("Stored review %s for course %s", review_id, review.course_code)
        return review_id

    def mark_helpful(self, review_id: str) -> Review:
        review = self.store.mark_helpful(review_id)
        log.info("Review %s marked helpful (%s/%s)", review_id, review.helpful_votes, review.total_votes)
        return review

    def report_review(self, review_id: str) -> Review:
        review = self.store.report(review_id)
        log.info("Review %s reported (%s reports)", review_id, review.reported_count)
        return review

    def course_stats(self, course_code: str) -> CourseStats:
        reviews = self.store.find_by_course(course_code, summary="Failed to fetch course stats")
        return compute_course_stats(course_code, reviews)
