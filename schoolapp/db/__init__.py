"""
Database module - MongoDB connection.
"""
from schoolapp.db.mongodb import get_db, get_collection, check_mongo_connection

__all__ = [
    "get_db",
    "get_collection",
    "check_mongo_connection"
]
