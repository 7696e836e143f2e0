import io
import os

from portfolio.models import CV
from portfolio.services.cv_storage import MAX_CV_SIZE

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def cv_form(name="resume.pdf", mimetype="application/pdf", content=b"%PDF-1.4 test cv"):
    return {"cv": (io.BytesIO(content), name, mimetype)}


def upload(client, auth_headers, **kwargs):
    return client.post(
        "/api/cv/upload", data=cv_form(**kwargs), headers=auth_headers, content_type="multipart/form-data",
    )


def stored_files(app):
    return sorted(os.listdir(app.config["UPLOAD_FOLDER"]))


def test_get_without_cv_returns_null(client):
    res = client.get("/api/cv")
    assert res.status_code == 200
    assert res.get_json() is None


def test_upload_stores_file_and_metadata(client, app, auth_headers):
    res = upload(client, auth_headers)

    assert res.status_code == 201
    cv = res.get_json()
    assert cv["originalName"] == "resume.pdf"
    assert cv["mimeType"] == "application/pdf"
    assert cv["size"] == len(b"%PDF-1.4 test cv")
    assert cv["filename"].startswith("cv-") and cv["filename"].endswith(".pdf")
    assert cv["url"] == f"/uploads/{cv['filename']}"
    assert stored_files(app) == [cv["filename"]]
    assert client.get("/api/cv").get_json() == cv


def test_uploaded_file_is_served(client, auth_headers):
    cv = upload(client, auth_headers).get_json()

    res = client.get(cv["url"])

    assert res.status_code == 200
    assert res.data == b"%PDF-1.4 test cv"


def test_second_upload_replaces_first(client, app, auth_headers):
    upload(client, auth_headers, name="old.pdf")
    second = upload(client, auth_headers, name="new.docx", mimetype=DOCX_MIME, content=b"docx bytes").get_json()

    assert CV.query.count() == 1
    assert stored_files(app) == [second["filename"]]
    current = client.get("/api/cv").get_json()
    assert current["originalName"] == "new.docx"
    assert current["mimeType"] == DOCX_MIME


def test_upload_requires_a_file(client, auth_headers):
    res = client.post("/api/cv/upload", data={}, headers=auth_headers, content_type="multipart/form-data")
    assert res.status_code == 400
    assert res.get_json()["error"] == "No file uploaded"


def test_upload_rejects_wrong_extension(client, app, auth_headers):
    res = upload(client, auth_headers, name="photo.png", mimetype="image/png")
    assert res.status_code == 415
    assert stored_files(app) == []


def test_upload_rejects_mismatched_mimetype(client, auth_headers):
    res = upload(client, auth_headers, name="resume.pdf", mimetype="text/plain")
    assert res.status_code == 415


def test_upload_rejects_files_over_ten_megabytes(client, app, auth_headers):
    res = upload(client, auth_headers, content=b"0" * (MAX_CV_SIZE + 1))

    assert res.status_code == 413
    assert CV.query.count() == 0
    assert stored_files(app) == []


def test_upload_accepts_exactly_ten_megabytes(client, auth_headers):
    res = upload(client, auth_headers, content=b"0" * MAX_CV_SIZE)

    assert res.status_code == 201
    assert res.get_json()["size"] == MAX_CV_SIZE


def test_oversized_request_is_refused_before_saving(client, app, auth_headers):
    res = upload(client, auth_headers, content=b"0" * (app.config["MAX_CONTENT_LENGTH"] + 1))

    assert res.status_code == 413
    assert res.get_json() == {"error": "File is too large. Maximum size is 10MB"}
    assert stored_files(app) == []


def test_delete_removes_record_and_file(client, app, auth_headers):
    upload(client, auth_headers)

    res = client.delete("/api/cv", headers=auth_headers)

    assert res.status_code == 200
    assert client.get("/api/cv").get_json() is None
    assert stored_files(app) == []


def test_delete_tolerates_missing_file(client, app, auth_headers):
    cv = upload(client, auth_headers).get_json()
    os.remove(os.path.join(app.config["UPLOAD_FOLDER"], cv["filename"]))

    assert client.delete("/api/cv", headers=auth_headers).status_code == 200


def test_delete_without_cv_is_404(client, auth_headers):
    res = client.delete("/api/cv", headers=auth_headers)
    assert res.status_code == 404
    assert res.get_json() == {"error": "CV not found"}
