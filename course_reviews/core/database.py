"""MongoDB client factory.

One client is built per process and handed to the review store through
FastAPI dependencies.
"""

import logging
from functools import lru_cache

from pymongo import MongoClient
from pymongo.collection import Collection

from .config import settings

log = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_client() -> MongoClient:
    log.info("Creating MongoDB client for database '%s'", settings.DB_NAME)
    return MongoClient(
        settings.MONGO_URI,
        serverSelectionTimeoutMS=settings.SERVER_SELECTION_TIMEOUT_MS,
    )


def get_reviews_collection(client: MongoClient = None) -> Collection:
    client = client or get_client()
    return client[settings.DB_NAME][settings.REVIEWS_COLLECTION]
