"""
MongoDB Connection Utility

MongoDB stores the four school collections:
- users: accounts created through signup
- schools: school name + photo
- classes: class name + ids of assigned students
- students: student name + photo + ids of assigned classes

The client is created once by the application factory and kept on
app.state; routes get the database through the get_db dependency.
"""
import logging

from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from schoolapp.core.config import Settings

logger = logging.getLogger(__name__)


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "schools": "schools",
    "classes": "classes",
    "students": "students",
}


def create_mongo_client(settings: Settings) -> MongoClient:
    """Create a MongoDB client (connection pooling handled internally by pymongo)."""
    return MongoClient(settings.mongodb_uri)


def get_db(request: Request) -> Database:
    """
    Dependency for FastAPI route injection.
    Usage:
        @router.get("/students")
        async def list_students(db: Database = Depends(get_db)):
            ...
    """
    return request.app.state.db


def get_collection(db: Database, name: str) -> Collection:
    """Get one of the COLLECTIONS by key."""
    return db[COLLECTIONS[name]]


def check_mongo_connection(client: MongoClient) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        client.admin.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes for the lookups the routes perform.
    Call this once during app startup.
    """
    # Login looks users up by email (not unique)
    get_collection(db, "users").create_index([("email", ASCENDING)])

    # Membership queries ($all / $in) on the reference arrays
    get_collection(db, "classes").create_index([("students", ASCENDING)])
    get_collection(db, "students").create_index([("classes", ASCENDING)])

    logger.info("MongoDB indexes created on %s", db.name)
