import os

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from schoolapp.services.mongo_service import StudentService


def create_student(client, headers, name):
    return client.post("/students", data={"name": name}, headers=headers).json()


def create_class(client, headers, name):
    return client.post("/classes", json={"name": name}, headers=headers).json()


def assign(client, headers, class_id, student_id):
    return client.post(
        "/assign-student-to-class",
        json={"class_id": class_id, "student_id": student_id},
        headers=headers,
    )


def test_create_student_without_photo(client, auth_headers):
    response = client.post("/students", data={"name": "Sam"}, headers=auth_headers)
    assert response.status_code == 200
    student = response.json()
    assert student["name"] == "Sam"
    assert student["photo"] is None
    assert student["classes"] == []


def test_create_student_with_photo(client, auth_headers, settings):
    response = client.post(
        "/students",
        data={"name": "Sam"},
        files={"photo": ("sam.jpg", b"jpeg-bytes", "image/jpeg")},
        headers=auth_headers,
    )
    assert response.status_code == 200
    path = response.json()["photo"]
    assert os.path.dirname(path) == settings.upload_dir
    assert len(os.path.basename(path)) == 32
    assert os.path.exists(path)


def test_list_students(client, auth_headers):
    create_student(client, auth_headers, "Sam")
    create_student(client, auth_headers, "Kim")
    response = client.get("/students", headers=auth_headers)
    assert response.status_code == 200
    assert sorted(s["name"] for s in response.json()) == ["Kim", "Sam"]


def test_assign_student_links_both_sides(client, auth_headers, db):
    math = create_class(client, auth_headers, "Math")
    sam = create_student(client, auth_headers, "Sam")

    response = assign(client, auth_headers, math["_id"], sam["_id"])
    assert response.status_code == 200
    assert response.json()["message"] == "Student assigned to class successfully"

    assert client.get(f"/classes/{math['_id']}", headers=auth_headers).json()["students"] == [sam["_id"]]
    stored = db.students.find_one({"_id": ObjectId(sam["_id"])})
    assert stored["classes"] == [ObjectId(math["_id"])]


def test_assign_twice_duplicates_entries(client, auth_headers, db):
    math = create_class(client, auth_headers, "Math")
    sam = create_student(client, auth_headers, "Sam")

    assert assign(client, auth_headers, math["_id"], sam["_id"]).status_code == 200
    assert assign(client, auth_headers, math["_id"], sam["_id"]).status_code == 200

    assert client.get(f"/classes/{math['_id']}", headers=auth_headers).json()["students"] == [sam["_id"]] * 2
    stored = db.students.find_one({"_id": ObjectId(sam["_id"])})
    assert stored["classes"] == [ObjectId(math["_id"])] * 2


@pytest.mark.parametrize("class_id,student_id", [
    ("abc", str(ObjectId())),
    (str(ObjectId()), "abc"),
    (None, None),
    (123, 456),
])
def test_assign_malformed_ids_is_400(client, auth_headers, class_id, student_id):
    response = assign(client, auth_headers, class_id, student_id)
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid class or student ID"}


def test_assign_missing_record_is_404_and_writes_nothing(client, auth_headers, db):
    math = create_class(client, auth_headers, "Math")
    response = assign(client, auth_headers, math["_id"], str(ObjectId()))
    assert response.status_code == 404
    assert response.json() == {"message": "Class or student not found"}
    assert db.classes.find_one({"_id": ObjectId(math["_id"])})["students"] == []


def test_students_in_all_classes_without_classes_is_empty(client, auth_headers):
    create_student(client, auth_headers, "Sam")
    response = client.get("/students-in-all-classes", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_students_in_all_classes_returns_supersets(client, auth_headers):
    c1 = create_class(client, auth_headers, "C1")
    c2 = create_class(client, auth_headers, "C2")
    both = create_student(client, auth_headers, "Both")
    only_c1 = create_student(client, auth_headers, "OnlyC1")
    create_student(client, auth_headers, "None")

    assign(client, auth_headers, c1["_id"], both["_id"])
    assign(client, auth_headers, c2["_id"], both["_id"])
    assign(client, auth_headers, c1["_id"], only_c1["_id"])

    response = client.get("/students-in-all-classes", headers=auth_headers)
    assert response.status_code == 200
    assert [s["_id"] for s in response.json()] == [both["_id"]]


def test_classmates_share_at_least_one_class(client, auth_headers):
    c1 = create_class(client, auth_headers, "C1")
    c2 = create_class(client, auth_headers, "C2")
    target = create_student(client, auth_headers, "Target")
    mate = create_student(client, auth_headers, "Mate")
    other = create_student(client, auth_headers, "Other")
    create_student(client, auth_headers, "Loner")

    assign(client, auth_headers, c1["_id"], target["_id"])
    assign(client, auth_headers, c1["_id"], mate["_id"])
    assign(client, auth_headers, c2["_id"], other["_id"])

    response = client.get(f"/classmates/{target['_id']}", headers=auth_headers)
    assert response.status_code == 200
    ids = [s["_id"] for s in response.json()]
    assert ids == [mate["_id"]]
    assert target["_id"] not in ids


def test_classmates_of_student_without_classes_is_empty(client, auth_headers):
    lonely = create_student(client, auth_headers, "Lonely")
    create_student(client, auth_headers, "Other")
    response = client.get(f"/classmates/{lonely['_id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_classmates_malformed_id_is_400(client, auth_headers):
    response = client.get("/classmates/abc", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid student ID"}


def test_classmates_unknown_student_is_404(client, auth_headers):
    response = client.get(f"/classmates/{ObjectId()}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"message": "Student not found"}


def test_database_error_becomes_generic_500(app, auth_headers, monkeypatch):
    def boom(self):
        raise RuntimeError("database down")

    monkeypatch.setattr(StudentService, "find_all", boom)
    with TestClient(app, raise_server_exceptions=False) as c:
        response = c.get("/students", headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}


def test_health_reports_status(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["mongodb"] in ("connected", "disconnected")


def test_assign_without_body_is_400(client, auth_headers):
    response = client.post("/assign-student-to-class", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid class or student ID"}
