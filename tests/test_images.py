from unittest.mock import AsyncMock, patch

import httpx
import pytest

from birja.core.factory import Factory
from birja.services.cloudflare_images import CloudflareImagesService


@pytest.fixture
def images_service(app):
    service = CloudflareImagesService("acc", "tok", "hash")
    app.dependency_overrides[Factory.get_images_service] = lambda: service
    return service


def _cloudflare_replies(response):
    return patch.object(httpx.AsyncClient, "post", new=AsyncMock(return_value=response))


def test_direct_upload_returns_upload_url(client, employer, images_service):
    reply = httpx.Response(200, json={"success": True, "result": {"uploadURL": "https://upload.example/one"}})

    with _cloudflare_replies(reply) as post:
        response = client.post("/api/images/direct-upload", headers=employer["headers"])

    assert response.status_code == 200
    assert response.json() == {"uploadURL": "https://upload.example/one"}
    url = post.await_args.args[0]
    assert url == "https://api.cloudflare.com/client/v4/accounts/acc/images/v2/direct_upload"
    assert post.await_args.kwargs["headers"] == {"Authorization": "Bearer tok"}


def test_direct_upload_reports_cloudflare_failure(client, employer, images_service):
    reply = httpx.Response(200, json={"success": False, "errors": [{"code": 10000, "message": "auth"}]})

    with _cloudflare_replies(reply):
        response = client.post("/api/images/direct-upload", headers=employer["headers"])

    assert response.status_code == 500
    assert response.json() == {"error": "Cloudflare error"}


def test_direct_upload_reports_non_json_body(client, employer, images_service):
    with _cloudflare_replies(httpx.Response(502, text="<html>bad gateway</html>")):
        response = client.post("/api/images/direct-upload", headers=employer["headers"])

    assert response.status_code == 500
    assert response.json() == {"error": "Cloudflare error"}


def test_direct_upload_reports_network_failure(client, employer, images_service):
    with patch.object(httpx.AsyncClient, "post", new=AsyncMock(side_effect=httpx.ConnectError("refused"))):
        response = client.post("/api/images/direct-upload", headers=employer["headers"])

    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}


def test_direct_upload_requires_configuration(app, client, employer):
    app.dependency_overrides[Factory.get_images_service] = lambda: CloudflareImagesService(None, None)

    with patch.object(httpx.AsyncClient, "post", new=AsyncMock()) as post:
        response = client.post("/api/images/direct-upload", headers=employer["headers"])

    assert response.status_code == 500
    assert response.json() == {"error": "Cloudflare Images not configured"}
    assert post.await_count == 0


def test_image_info_is_public(client, images_service):
    response = client.get("/api/images/info/abc")

    assert response.status_code == 200
    body = response.json()
    assert body["imageId"] == "abc"
    assert body["imageUrl"] == "https://imagedelivery.net/hash/abc/public"


def test_image_debug_shows_configuration(client, employer, images_service):
    response = client.get("/api/images/debug/abc", headers=employer["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["accountHash"] == "hash"
    assert body["variant"] == "public"
    assert body["imageUrl"] == "https://imagedelivery.net/hash/abc/public"


def test_image_info_without_account_hash(app, client):
    app.dependency_overrides[Factory.get_images_service] = lambda: CloudflareImagesService("acc", "tok")

    response = client.get("/api/images/info/abc")

    assert response.status_code == 500
    assert response.json() == {"error": "CF_IMAGES_ACCOUNT_HASH not configured"}
