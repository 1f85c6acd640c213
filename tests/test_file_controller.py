import httpx
import pytest

from controller.controller_dependencies import rate_limiter
from main import app

pytestmark = pytest.mark.anyio


@pytest.fixture
async def client(file_service, registry, s3_client):
    for key, body, ctype in [
        ("docs/a.pdf", b"%PDF-a", "application/pdf"),
        ("docs/b.pdf", b"%PDF-b", "application/pdf"),
        ("readme.txt", b"read me", "text/plain"),
        ("img/", b"", None),
        ("img/2024/x.png", b"\x89PNG", "image/png"),
    ]:
        s3_client.put(key, body, ctype)

    # Lifespan is not run by ASGITransport; wire state the way it would.
    app.state.file_service = file_service
    app.state.metrics_registry = registry
    app.dependency_overrides[rate_limiter] = lambda: None
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


async def test_list_files(client):
    res = await client.get("/files")
    assert res.status_code == 200
    assert res.json() == {
        "files": ["docs/a.pdf", "docs/b.pdf", "readme.txt", "img/2024/x.png"]
    }


async def test_list_categorized_files(client):
    res = await client.get("/files/categorized")
    assert res.status_code == 200
    assert res.json() == {
        "categories": {
            "docs": ["a.pdf", "b.pdf"],
            "Uncategorized": ["readme.txt"],
            "img": ["2024/x.png"],
        }
    }


async def test_download_categorized_miss_then_hit(client):
    first = await client.get("/download/docs/a.pdf")
    second = await client.get("/download/docs/a.pdf")

    assert first.status_code == second.status_code == 200
    assert first.content == second.content == b"%PDF-a"
    assert first.headers["x-cache-status"] == "MISS"
    assert second.headers["x-cache-status"] == "HIT"
    assert second.headers["content-type"] == "application/pdf"


async def test_download_flat_file(client):
    res = await client.get("/download/readme.txt")
    assert res.status_code == 200
    assert res.content == b"read me"
    assert res.headers["content-type"].startswith("text/plain")


async def test_download_nested_path(client):
    res = await client.get("/download/img/2024/x.png")
    assert res.status_code == 200
    assert res.content == b"\x89PNG"


async def test_download_missing_file_is_404(client):
    res = await client.get("/download/docs/nope.pdf")
    assert res.status_code == 404
    assert res.json() == {"detail": "File not found"}
    assert "x-cache-status" not in res.headers


async def test_listing_failure_is_502(client, s3_client):
    from tests.fakes import client_error

    s3_client.fail_with = client_error("InternalError", "ListObjectsV2")
    res = await client.get("/files")
    assert res.status_code == 502
    assert res.json() == {"detail": "Error listing files"}


async def test_metrics_exposition(client):
    await client.get("/download/docs/a.pdf")
    await client.get("/download/docs/a.pdf")
    res = await client.get("/metrics")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/plain")
    text = res.text
    labels = 'filename="a.pdf",category="docs",region="eu-west-1"'
    assert f"file_view_total{{{labels}}} 2.0" in text
    assert f"cache_hits_total{{{labels}}} 1.0" in text
    assert f"cache_misses_total{{{labels}}} 1.0" in text
    assert "file_request_duration_seconds_bucket" in text


async def test_healthz(client):
    res = await client.get("/healthz")
    assert res.json() == {"ok": True}


@pytest.mark.parametrize("url", ["/download/", "/download/img/"])
async def test_download_directory_marker_is_404(client, s3_client, redis_client, url):
    res = await client.get(url)
    assert res.status_code == 404
    assert res.json() == {"detail": "File not found"}
    assert "x-cache-status" not in res.headers
    assert s3_client.get_calls == {}
    assert redis_client.data == {}
