"""HTTP client mirroring the review API.

Submissions go through the same validator and normalizer as the server, so
bad input is rejected before any request and anonymous reviews never send an
author email over the wire.
"""

import logging
from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

from course_reviews.core.exceptions import ReviewAPIError, ReviewNotFound, ReviewValidationError
from course_reviews.models.review import (
    CourseStats,
    HelpfulVoteResponse,
    ReportResponse,
    ReviewList,
)
from course_reviews.utils.normalize import normalize_submission
from course_reviews.utils.validation import validate_submission

log = logging.getLogger(__name__)

SERVER_OWNED_FIELDS = {"verified", "helpful_votes", "total_votes", "reported_count"}


class ReviewClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self._owns_http = http_client is None
        self.http = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "ReviewClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, review_id: Optional[str] = None, **kwargs) -> dict:
        response = self.http.request(method, path, **kwargs)
        if response.is_success:
            return response.json()

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        message = payload.get("error") or response.reason_phrase
        log.warning("%s %s failed with %s: %s", method, path, response.status_code, message)

        if response.status_code == 400:
            raise ReviewValidationError(message)
        if response.status_code == 404 and review_id is not None:
            raise ReviewNotFound(review_id)
        raise ReviewAPIError(response.status_code, message, payload.get("details"))

    def get_reviews_by_course(self, course_code: str) -> ReviewList:
        data = self._request("GET", "/api/reviews", params={"courseCode": course_code})
        return ReviewList.model_validate(data)

    def submit_review(self, submission: Mapping[str, Any]) -> str:
        validate_submission(submission)
        review = normalize_submission(submission)
        payload = review.model_dump(by_alias=True, exclude=SERVER_OWNED_FIELDS)
        data = self._request("POST", "/api/reviews", json=payload)
        return data["reviewId"]

    def upvote_review(self, review_id: str) -> HelpfulVoteResponse:
        data = self._request("PUT", f"/api/reviews/{quote(review_id, safe='')}/helpful", review_id=review_id)
        return HelpfulVoteResponse.model_validate(data)

    def report_review(self, review_id: str) -> ReportResponse:
        data = self._request("PUT", f"/api/reviews/{quote(review_id, safe='')}/report", review_id=review_id)
        return ReportResponse.model_validate(data)

    def get_course_stats(self, course_code: str) -> CourseStats:
        data = self._request("GET", f"/api/courses/{quote(course_code, safe='')}/stats")
        return CourseStats.model_validate(data)
