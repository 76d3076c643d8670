import mongomock
import pytest
from fastapi.testclient import TestClient

from course_reviews.core.dependencies import get_review_store
from course_reviews.main import app
from course_reviews.services.review_store import ReviewStore


@pytest.fixture
def collection():
    """In-memory MongoDB collection, fresh per test."""
    return mongomock.MongoClient()["course_reviews"]["reviews"]


@pytest.fixture
def store(collection) -> ReviewStore:
    return ReviewStore(collection)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_review_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def submission() -> dict:
    return {
        "courseCode": "CASCS131",
        "courseName": "Combinatoric Structures",
        "collegeCode": "CAS",
        "subjectCode": "CS",
        "courseNumber": "131",
        "rating": 4,
        "reviewText": "Tough problem sets but the lectures were great.",
        "difficultyRating": 4,
        "workloadRating": 3,
        "semesterTaken": "Fall 2024",
    }
