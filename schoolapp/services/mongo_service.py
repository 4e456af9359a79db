"""
MongoDB Service - CRUD operations for the school collections.

Collections in this database:
1. users     - signup accounts (bcrypt password hash, invite codes, role)
2. schools   - school name + photo
3. classes   - class name + list of student ObjectIds
4. students  - student name + photo + list of class ObjectIds

Class <-> Student is many-to-many through the two parallel id arrays.
The arrays are only ever appended to; nothing deduplicates them.
"""

from typing import Optional, List, Any
from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database

from schoolapp.db.mongodb import get_collection


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def _to_jsonable(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    return value


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document (including id arrays) to JSON-serializable dict."""
    if doc is None:
        return None
    return _to_jsonable(doc)


def serialize_docs(docs) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


# ============================================================
# USERS COLLECTION
# ============================================================

class UserService:
    """
    Handles user account storage.
    Email is NOT unique: find_by_email returns the first match.
    """

    def __init__(self, db: Database):
        self.collection: Collection = get_collection(db, "users")

    def insert(
        self,
        name: Optional[str],
        email: Optional[str],
        password_hash: str,
        photo: Optional[str] = None,
        parent_invite_code: Optional[str] = None,
        teacher_invite_code: Optional[str] = None,
        role: str = "student",
    ) -> dict:
        """
        Insert a user. The password must already be hashed.

        Returns:
            The stored document (with its new _id)
        """
        doc = {
            "name": name,
            "email": email,
            "password": password_hash,
            "photo": photo,
            "parentInviteCode": parent_invite_code,
            "teacherInviteCode": teacher_invite_code,
            "role": role,
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def find_by_email(self, email: str) -> Optional[dict]:
        """Exact, case-sensitive email lookup."""
        return self.collection.find_one({"email": email})

    def get_by_id(self, user_id: str) -> Optional[dict]:
        return self.collection.find_one({"_id": ObjectId(user_id)})


# ============================================================
# SCHOOLS COLLECTION
# ============================================================

class SchoolService:

    def __init__(self, db: Database):
        self.collection: Collection = get_collection(db, "schools")

    def insert(self, name: Optional[str], photo: Optional[str]) -> dict:
        doc = {"name": name, "photo": photo}
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def find_by_ids(self, ids: List[Any]) -> List[dict]:
        return list(self.collection.find({"_id": {"$in": ids}}))

    def find_all(self) -> List[dict]:
        return list(self.collection.find())


# ============================================================
# CLASSES COLLECTION
# ============================================================

class ClassService:

    def __init__(self, db: Database):
        self.collection: Collection = get_collection(db, "classes")

    def insert(self, name: Optional[str]) -> dict:
        """Create a class with no students yet."""
        doc = {"name": name, "students": []}
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def get_by_id(self, class_id: str) -> Optional[dict]:
        return self.collection.find_one({"_id": ObjectId(class_id)})

    def find_all(self) -> List[dict]:
        return list(self.collection.find())

    def push_student(self, class_id: ObjectId, student_id: ObjectId) -> bool:
        """Append a student id to the class (duplicates allowed)."""
        result = self.collection.update_one(
            {"_id": class_id},
            {"$push": {"students": student_id}}
        )
        return result.modified_count > 0


# ============================================================
# STUDENTS COLLECTION
# ============================================================

class StudentService:

    def __init__(self, db: Database):
        self.collection: Collection = get_collection(db, "students")

    def insert(self, name: Optional[str], photo: Optional[str] = None) -> dict:
        """Create a student with no classes yet."""
        doc = {"name": name, "photo": photo, "classes": []}
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def get_by_id(self, student_id: str) -> Optional[dict]:
        return self.collection.find_one({"_id": ObjectId(student_id)})

    def find_all(self) -> List[dict]:
        return list(self.collection.find())

    def push_class(self, student_id: ObjectId, class_id: ObjectId) -> bool:
        """Append a class id to the student (duplicates allowed)."""
        result = self.collection.update_one(
            {"_id": student_id},
            {"$push": {"classes": class_id}}
        )
        return result.modified_count > 0

    def find_in_all_classes(self, class_ids: List[ObjectId]) -> List[dict]:
        """Students whose class list contains every id in class_ids."""
        if not class_ids:
            return []
        return list(self.collection.find({"classes": {"$all": class_ids}}))

    def find_classmates(self, student: dict) -> List[dict]:
        """Other students sharing at least one class with the given student."""
        return list(self.collection.find({
            "_id": {"$ne": student["_id"]},  # Exclude the target student
            "classes": {"$in": student.get("classes", [])}
        }))
