"""
API tests for the review endpoints, backed by an in-memory MongoDB.
"""

from unittest.mock import MagicMock

from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from course_reviews.core.dependencies import get_review_store
from course_reviews.main import app
from course_reviews.services.review_store import ReviewStore


def post_review(client, payload):
    response = client.post("/api/reviews", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["reviewId"]


class TestSubmitReview:
    def test_submit_returns_201_with_id(self, client, submission, collection):
        response = client.post("/api/reviews", json=submission)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Review submitted successfully"
        assert collection.count_documents({"_id": ObjectId(body["reviewId"])}) == 1

    def test_anonymous_submission_is_redacted(self, client, submission, collection):
        submission.update(isAnonymous=True, authorName="Ada Lovelace", authorEmail="ada@bu.edu")
        review_id = post_review(client, submission)

        doc = collection.find_one({"_id": ObjectId(review_id)})
        assert doc["authorName"] == "Anonymous"
        assert doc["authorEmail"] is None

    def test_default_is_anonymous(self, client, submission, collection):
        submission.update(authorName="Ada Lovelace", authorEmail="ada@bu.edu")
        review_id = post_review(client, submission)

        doc = collection.find_one({"_id": ObjectId(review_id)})
        assert doc["isAnonymous"] is True
        assert doc["authorName"] == "Anonymous"
        assert doc["authorEmail"] is None

    def test_named_submission_keeps_author(self, client, submission, collection):
        submission.update(isAnonymous=False, authorName="Ada Lovelace", authorEmail="ada@bu.edu")
        review_id = post_review(client, submission)

        doc = collection.find_one({"_id": ObjectId(review_id)})
        assert doc["authorName"] == "Ada Lovelace"
        assert doc["authorEmail"] == "ada@bu.edu"

    def test_validation_messages(self, client, submission):
        cases = [
            ({"courseCode": ""}, "courseCode is required"),
            ({"rating": 7}, "rating must be between 1 and 5"),
            ({"rating": None}, "rating must be between 1 and 5"),
            ({"reviewText": "meh"}, "reviewText is required and must be at least 20 characters"),
            ({"profHelpfulnessRating": 0}, "profHelpfulnessRating must be between 1 and 5"),
        ]
        for override, message in cases:
            response = client.post("/api/reviews", json={**submission, **override})
            assert response.status_code == 400
            assert response.json() == {"error": message}

    def test_rejected_submission_writes_nothing(self, client, submission, collection):
        client.post("/api/reviews", json={**submission, "rating": 0})
        assert collection.count_documents({}) == 0

    def test_non_object_body_is_400(self, client):
        response = client.post("/api/reviews", json=["not", "an", "object"])
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"

        response = client.post(
            "/api/reviews", content="{broken", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400


class TestGetReviews:
    def test_requires_course_code(self, client):
        response = client.get("/api/reviews")
        assert response.status_code == 400
        assert response.json() == {"error": "courseCode is required"}

    def test_empty_course(self, client):
        response = client.get("/api/reviews", params={"courseCode": "CASCS999"})
        assert response.status_code == 200
        assert response.json() == {"reviews": [], "averageRating": 0, "totalReviews": 0}

    def test_lists_reviews_most_helpful_first(self, client, submission):
        first = post_review(client, {**submission, "rating": 5})
        second = post_review(client, {**submission, "rating": 4})
        post_review(client, {**submission, "rating": 3})
        post_review(client, {**submission, "courseCode": "CASLF309", "rating": 1})
        client.put(f"/api/reviews/{second}/helpful")
        client.put(f"/api/reviews/{second}/helpful")
        client.put(f"/api/reviews/{first}/helpful")

        body = client.get("/api/reviews", params={"courseCode": "CASCS131"}).json()

        assert body["totalReviews"] == 3
        assert body["averageRating"] == 4.0
        assert [r["id"] for r in body["reviews"][:2]] == [second, first]
        review = body["reviews"][0]
        assert review["helpfulVotes"] == 2
        assert review["courseCode"] == "CASCS131"
        assert review["reviewText"] == submission["reviewText"]
        assert review["verified"] is False
        assert "createdAt" in review and "updatedAt" in review

    def test_fetch_is_idempotent(self, client, submission):
        post_review(client, submission)
        post_review(client, {**submission, "rating": 1})

        first = client.get("/api/reviews", params={"courseCode": "CASCS131"}).json()
        second = client.get("/api/reviews", params={"courseCode": "CASCS131"}).json()

        assert first == second


class TestVotesAndReports:
    def test_mark_helpful(self, client, submission):
        review_id = post_review(client, submission)

        response = client.put(f"/api/reviews/{review_id}/helpful")
        assert response.status_code == 200
        assert response.json() == {"success": True, "helpfulVotes": 1, "totalVotes": 1}

        response = client.put(f"/api/reviews/{review_id}/helpful")
        assert response.json() == {"success": True, "helpfulVotes": 2, "totalVotes": 2}

    def test_report(self, client, submission, collection):
        review_id = post_review(client, submission)

        response = client.put(f"/api/reviews/{review_id}/report")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Review reported successfully"}
        assert collection.find_one({"_id": ObjectId(review_id)})["reportedCount"] == 1

    def test_unknown_review_is_404(self, client):
        for action in ("helpful", "report"):
            response = client.put(f"/api/reviews/{ObjectId()}/{action}")
            assert response.status_code == 404
            assert response.json() == {"error": "Review not found"}

            response = client.put(f"/api/reviews/garbage/{action}")
            assert response.status_code == 404

    def test_blank_review_id_is_400(self, client):
        response = client.put("/api/reviews/%20/helpful")
        assert response.status_code == 400
        assert response.json() == {"error": "reviewId is required"}


class TestTransportErrors:
    def test_wrong_method_is_405(self, client):
        for method, path in [
            ("delete", "/api/reviews"),
            ("get", f"/api/reviews/{ObjectId()}/helpful"),
            ("post", f"/api/reviews/{ObjectId()}/report"),
            ("post", "/api/courses/CASCS131/stats"),
        ]:
            response = getattr(client, method)(path)
            assert response.status_code == 405, path
            assert response.json() == {"error": "Method not allowed"}

    def test_store_failure_is_500_with_details(self, submission):
        collection = MagicMock()
        collection.find.side_effect = PyMongoError("connection reset")
        collection.update_one.side_effect = PyMongoError("not primary")
        app.dependency_overrides[get_review_store] = lambda: ReviewStore(collection)
        try:
            client = TestClient(app)

            response = client.get("/api/reviews", params={"courseCode": "CASCS131"})
            assert response.status_code == 500
            assert response.json() == {"error": "Failed to fetch reviews", "details": "connection reset"}

            response = client.post("/api/reviews", json=submission)
            assert response.status_code == 500
            assert response.json() == {"error": "Failed to submit review", "details": "not primary"}

            response = client.get("/api/courses/CASCS131/stats")
            assert response.json()["error"] == "Failed to fetch course stats"
        finally:
            app.dependency_overrides.clear()

    def test_malformed_stored_review_is_500_with_details(self, client, collection):
        collection.insert_one({"courseCode": "CASMA123", "rating": 4.5, "reviewText": "x" * 30})

        response = client.get("/api/reviews", params={"courseCode": "CASMA123"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to fetch reviews"
        assert "rating" in body["details"]

    def test_cors_allows_any_origin(self, client):
        response = client.get(
            "/api/reviews",
            params={"courseCode": "CASCS131"},
            headers={"Origin": "https://example.edu"},
        )
        assert response.headers["access-control-allow-origin"] == "*"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
