"""Tests for the public site: pages, gallery and contact form."""

import httpx
import pytest


class TestPages:
    @pytest.mark.parametrize(
        ("path", "page"),
        [("/", "index"), ("/about", "about"), ("/clients", "clients"), ("/past-work", "past-work"),
         ("/past-work/work-12", "past-work"), ("/contact", "contact"), ("/portal", "portal")],
    )
    def test_page_served(self, client, path, page):
        response = client.get(path)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert f"<body>{page}</body>" in response.text

    def test_static_files(self, client, site_dir):
        (site_dir / "styles.css").write_text("body {}", encoding="utf-8")
        assert client.get("/styles.css").text == "body {}"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestGallery:
    def test_lists_images(self, client, site_dir):
        for name in ["work-2.png", "work-10.png", "banner.png"]:
            (site_dir / "images" / name).write_bytes(b"x")

        response = client.get("/api/past-work")
        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert [item["id"] for item in data["items"]] == ["work-2", "work-10"]
        assert client.get(data["items"][0]["url"]).content == b"x"


class TestContact:
    def test_delivered(self, client, app):
        sent = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return httpx.Response(204)

        app._core.services.contact.transport = httpx.MockTransport(handler)
        response = client.post(
            "/api/contact", json={"discordUsername": "fan", "discordId": "42", "message": "Hi", "service": "Badges"}
        )
        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert len(sent) == 1

    def test_missing_fields(self, client):
        response = client.post("/api/contact", json={"discordUsername": "fan"})
        assert response.status_code == 400
        assert response.json()["error"] == "Discord Username, Discord ID, and message are required"

    def test_upstream_failure(self, client, app):
        app._core.services.contact.transport = httpx.MockTransport(lambda request: httpx.Response(500, text="down"))
        response = client.post("/api/contact", json={"discordUsername": "fan", "discordId": "42", "message": "Hi"})
        assert response.status_code == 502
        assert response.json() == {"ok": False, "error": "Discord webhook failed", "type": "upstream_error", "details": "down"}
