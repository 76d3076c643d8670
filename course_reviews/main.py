import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from course_reviews.core.config import settings
from course_reviews.core.dependencies import get_review_store
from course_reviews.core.handlers import register_exception_handlers
from .routers.reviews import router as reviews_router
from .routers.courses import router as courses_router
from .routers.recommendations import router as recommendations_router

log = logging.getLogger(__name__)

app = FastAPI(
    title="Course Reviews API",
    version="1.0",
    description=(
        "Course reviews, rating statistics, helpful votes, reports "
        "and course recommendations"
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers for different API sections
app.include_router(reviews_router)
app.include_router(courses_router)
app.include_router(recommendations_router)


# Health check endpoint
@app.get("/")
def read_root():
    return {"message": "Course Reviews API is running", "version": "1.0"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.on_event("startup")
def startup_event() -> None:
    """Run startup tasks."""
    if settings.ENSURE_INDEXES:
        get_review_store().ensure_indexes()
    log.info("Course Reviews API started")
