"""MongoDB boundary for review documents.

Only five primitives are used: equality filter on courseCode, descending
sort on helpfulVotes, insert returning the generated id, atomic $inc, and
server-assigned timestamps via $currentDate.
"""

import logging
from typing import List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from course_reviews.core.exceptions import ReviewNotFound, StoreFailure
from course_reviews.models.review import NewReview, Review

log = logging.getLogger(__name__)

COURSE_INDEX = "CourseHelpfulIndex"


def _object_id(review_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(review_id)
    except (InvalidId, TypeError):
        return None


def _to_review(doc: dict) -> Review:
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    return Review.model_validate(doc)


class ReviewStore:
    def __init__(self, collection: Collection):
        self.collection = collection

    def ensure_indexes(self) -> None:
        self.collection.create_index(
            [("courseCode", 1), ("helpfulVotes", DESCENDING)],
            name=COURSE_INDEX,
        )
        log.info("Ensured index '%s' exists", COURSE_INDEX)

    def find_by_course(self, course_code: str, summary: str = "Failed to fetch reviews") -> List[Review]:
        """All reviews for a course, most helpful first."""
        try:
            cursor = self.collection.find({"courseCode": course_code}).sort("helpfulVotes", DESCENDING)
            return [_to_review(doc) for doc in cursor]
        except (PyMongoError, ValidationError) as exc:
            log.exception("Error fetching reviews for %s", course_code)
            raise StoreFailure(summary, str(exc)) from exc

    def insert(self, review: NewReview) -> str:
        oid = ObjectId()
        doc = review.model_dump(by_alias=True)
        try:
            self.collection.update_one(
                {"_id": oid},
                {
                    "$setOnInsert": doc,
                    "$currentDate": {"createdAt": True, "updatedAt": True},
                },
                upsert=True,
            )
        except PyMongoError as exc:
            log.exception("Error submitting review for %s", review.course_code)
            raise StoreFailure("Failed to submit review", str(exc)) from exc
        return str(oid)

    def increment(self, review_id: str, counters: dict, summary: str) -> Review:
        """Atomically add to counters and refresh updatedAt. No change on a missing id."""
        oid = _object_id(review_id)
        if oid is None:
            raise ReviewNotFound(review_id)
        try:
            updated = self.collection.find_one_and_update(
                {"_id": oid},
                {"$inc": counters, "$currentDate": {"updatedAt": True}},
                return_document=ReturnDocument.AFTER,
            )
            if not updated:
                raise ReviewNotFound(review_id)
            return _to_review(updated)
        except (PyMongoError, ValidationError) as exc:
            log.exception("Error updating review %s", review_id)
            raise StoreFailure(summary, str(exc)) from exc

    def mark_helpful(self, review_id: str) -> Review:
        return self.increment(
            review_id,
            {"helpfulVotes": 1, "totalVotes": 1},
            "Failed to upvote review",
        )

    def report(self, review_id: str) -> Review:
        return self.increment(review_id, {"reportedCount": 1}, "Failed to report review")
