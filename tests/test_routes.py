from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from bgremover.core.config import Settings
from bgremover.main import create_app

from conftest import image_bytes


def _upload(api_client: TestClient, content: bytes, filename: str = "photo.png") -> str:
    response = api_client.post(
        "/api/upload-temp-image",
        files={"image": (filename, content, "image/png")},
    )
    assert response.status_code == 200
    return response.json()["imageUrl"]


def test_upload_serves_identical_bytes(api_client: TestClient, settings: Settings) -> None:
    content = image_bytes()

    image_url = _upload(api_client, content)

    assert image_url.startswith("http://testserver/temp/")
    fetched = api_client.get(image_url)
    assert fetched.status_code == 200
    assert fetched.content == content

    filename = image_url.rsplit("/", 1)[-1]
    assert (settings.temp_dir / filename).read_bytes() == content


def test_upload_generates_distinct_names(api_client: TestClient) -> None:
    first = _upload(api_client, image_bytes())
    second = _upload(api_client, image_bytes())

    assert first != second
    assert first.endswith(".png")


def test_upload_without_file_is_rejected(api_client: TestClient) -> None:
    response = api_client.post("/api/upload-temp-image")

    assert response.status_code == 400
    assert response.text == "No file uploaded."


def test_upload_with_wrong_field_is_rejected(api_client: TestClient) -> None:
    response = api_client.post(
        "/api/upload-temp-image",
        files={"file": ("photo.png", image_bytes(), "image/png")},
    )

    assert response.status_code == 400


def test_upload_with_text_image_field_is_rejected(api_client: TestClient, settings: Settings) -> None:
    response = api_client.post("/api/upload-temp-image", data={"image": "not-a-file"})

    assert response.status_code == 400
    assert response.text == "No file uploaded."
    assert list(settings.temp_dir.iterdir()) == []


def test_upload_with_text_image_field_in_multipart_is_rejected(api_client: TestClient) -> None:
    response = api_client.post(
        "/api/upload-temp-image",
        data={"image": "not-a-file"},
        files={"other": ("photo.png", image_bytes(), "image/png")},
    )

    assert response.status_code == 400
    assert response.text == "No file uploaded."


def test_delete_removes_file(api_client: TestClient, settings: Settings) -> None:
    image_url = _upload(api_client, image_bytes())

    response = api_client.post("/api/delete-temp-image", json={"imageUrl": image_url})

    assert response.status_code == 200
    assert response.text == "Temporary image deleted successfully."
    assert api_client.get(image_url).status_code == 404
    assert list(settings.temp_dir.iterdir()) == []


def test_delete_ignores_query_string(api_client: TestClient) -> None:
    image_url = _upload(api_client, image_bytes())

    response = api_client.post("/api/delete-temp-image", json={"imageUrl": f"{image_url}?v=1"})

    assert response.status_code == 200
    assert api_client.get(image_url).status_code == 404


def test_delete_unknown_file_fails(api_client: TestClient) -> None:
    response = api_client.post(
        "/api/delete-temp-image",
        json={"imageUrl": "http://testserver/temp/does-not-exist"},
    )

    assert response.status_code == 500
    assert response.text == "Failed to delete temporary image."


def test_delete_twice_fails_second_time(api_client: TestClient) -> None:
    image_url = _upload(api_client, image_bytes())

    assert api_client.post("/api/delete-temp-image", json={"imageUrl": image_url}).status_code == 200
    assert api_client.post("/api/delete-temp-image", json={"imageUrl": image_url}).status_code == 500


def test_delete_cannot_escape_temp_dir(api_client: TestClient, settings: Settings, tmp_path: Path) -> None:
    outside = tmp_path / "outside.txt"
    outside.write_text("keep me")

    response = api_client.post(
        "/api/delete-temp-image",
        json={"imageUrl": "http://testserver/temp/../outside.txt"},
    )

    # only the last path segment is used, which does not exist inside the temp dir
    assert response.status_code == 500
    assert outside.exists()


def test_delete_requires_image_url(api_client: TestClient) -> None:
    response = api_client.post("/api/delete-temp-image", json={})

    assert response.status_code == 422


def test_unknown_temp_file_is_not_found(api_client: TestClient) -> None:
    assert api_client.get("/temp/missing.png").status_code == 404


def test_health(api_client: TestClient) -> None:
    response = api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_temp_dir_is_created_on_startup(tmp_path: Path) -> None:
    settings = Settings(temp_dir=tmp_path / "later")
    app = create_app(settings)

    assert not settings.temp_dir.exists()
    with TestClient(app):
        assert settings.temp_dir.is_dir()
