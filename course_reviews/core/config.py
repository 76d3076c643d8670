from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
import logging
import os


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MONGO_URI: str = "mongodb://localhost:27017"
    DB_NAME: str = "course_reviews"
    REVIEWS_COLLECTION: str = "reviews"
    SERVER_SELECTION_TIMEOUT_MS: int = 5000
    CORS_ORIGINS: List[str] = ["*"]
    ENSURE_INDEXES: bool = True  # compound (courseCode, helpfulVotes) index at startup
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"


settings = Settings()

# Configure basic logging to logs directory
LOG_DIR = settings.LOG_DIR
if not os.path.isabs(LOG_DIR):
    LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), LOG_DIR)
os.makedirs(LOG_DIR, exist_ok=True)
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.FileHandler(os.path.join(LOG_DIR, "app.log")),
        logging.StreamHandler(),
    ],
)
