"""Timetable upload API tests."""

from achievify.api.dependencies import get_timetable_service
from achievify.main import app
from achievify.services.timetable import TimetableService

PDF_BYTES = b"%PDF-1.4\n% timetable\n"


def upload_timetable(client, user_id, title="Spring term", content=PDF_BYTES, **file_kwargs):
    filename = file_kwargs.get("filename", "timetable.pdf")
    mime = file_kwargs.get("mime", "application/pdf")
    return client.post(
        "/api/timetable",
        data={"userId": str(user_id), "title": title},
        files={"file": (filename, content, mime)},
    )


def test_get_timetable_none(client, user):
    """Test that a user without uploads gets null."""
    response = client.get("/api/timetable", params={"userId": user["id"]})
    assert response.status_code == 200
    assert response.json() is None


def test_get_timetable_requires_user(client):
    """Test that userId is required."""
    response = client.get("/api/timetable")
    assert response.status_code == 400
    assert response.json()["message"] == "userId required"


def test_upload_timetable(client, user, blob_store):
    """Test uploading stores the file and returns the row."""
    response = upload_timetable(client, user["id"], title="  Spring term ")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Spring term"
    assert data["mime"] == "application/pdf"
    assert data["file_path"].startswith("uploads/timetables/")
    assert data["file_path"].endswith("_timetable.pdf")
    assert data["uploaded_at"] is not None
    assert blob_store.resolve(data["file_path"]).read_bytes() == PDF_BYTES


def test_upload_sanitizes_filename(client, user):
    """Test that unsafe filename characters are replaced."""
    response = upload_timetable(client, user["id"], filename="../my time table (v2).pdf")
    assert response.status_code == 200
    name = response.json()["file_path"].rsplit("/", 1)[-1]
    assert name.split("_", 1)[1] == "my_time_table_v2_.pdf"


def test_upload_timetable_missing_title(client, user):
    """Test that a title is required."""
    response = upload_timetable(client, user["id"], title="")
    assert response.status_code == 400
    assert response.json()["message"] == "userId, title, file required"


def test_upload_timetable_missing_file(client, user):
    """Test that a file is required."""
    response = client.post("/api/timetable", data={"userId": str(user["id"]), "title": "No file"})
    assert response.status_code == 400


def test_upload_timetable_rejects_mime(client, user, blob_store):
    """Test that unsupported file types are rejected without storing anything."""
    response = upload_timetable(client, user["id"], filename="notes.txt", mime="text/plain")
    assert response.status_code == 415
    assert response.json()["message"] == "Only PNG/JPEG/WEBP or PDF allowed"
    assert list((blob_store.root / "timetables").iterdir()) == []


def test_upload_timetable_rejects_large_file(client, db, user, blob_store):
    """Test the size ceiling."""
    app.dependency_overrides[get_timetable_service] = lambda: TimetableService(
        db, blob_store, max_upload_bytes=16
    )
    response = upload_timetable(client, user["id"], content=b"x" * 17)
    assert response.status_code == 413
    assert client.get("/api/timetable", params={"userId": user["id"]}).json() is None


def test_latest_upload_is_current(client, user):
    """Test that the newest upload is returned."""
    upload_timetable(client, user["id"], title="Old")
    newest = upload_timetable(client, user["id"], title="New").json()

    response = client.get("/api/timetable", params={"userId": user["id"]})
    assert response.json()["id"] == newest["id"]
    assert response.json()["title"] == "New"


def test_delete_timetable(client, user, blob_store):
    """Test deleting removes the row and the file."""
    timetable = upload_timetable(client, user["id"]).json()
    path = blob_store.resolve(timetable["file_path"])
    assert path.exists()

    response = client.delete(f"/api/timetable/{timetable['id']}", params={"userId": user["id"]})
    assert response.status_code == 200
    assert response.json() == {"message": "Deleted"}
    assert not path.exists()
    assert client.get("/api/timetable", params={"userId": user["id"]}).json() is None

    response = client.delete(f"/api/timetable/{timetable['id']}", params={"userId": user["id"]})
    assert response.status_code == 404


def test_delete_timetable_not_owned(client, user, other_user, blob_store):
    """Test that another user cannot delete the timetable or its file."""
    timetable = upload_timetable(client, user["id"]).json()

    response = client.delete(
        f"/api/timetable/{timetable['id']}", params={"userId": other_user["id"]}
    )
    assert response.status_code == 404
    assert blob_store.resolve(timetable["file_path"]).exists()


def test_delete_timetable_with_missing_file(client, user, blob_store):
    """Test that a blob that is already gone does not fail the delete."""
    timetable = upload_timetable(client, user["id"]).json()
    blob_store.resolve(timetable["file_path"]).unlink()

    response = client.delete(f"/api/timetable/{timetable['id']}", params={"userId": user["id"]})
    assert response.status_code == 200
