"""Tests for portfolio endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_get_default_portfolio(client: TestClient, registered: dict[str, str]) -> None:
    response = client.get("/api/portfolio", headers=registered)

    assert response.status_code == 200
    body = response.json()
    assert body["theme"] == "minimal"
    assert body["isPublished"] is False
    assert body["socialLinks"] == {}
    assert "updatedAt" in body


class TestPatch:
    def test_partial_update(self, client: TestClient, registered: dict[str, str]) -> None:
        client.patch("/api/portfolio", headers=registered, json={"firstName": "Alice"})

        response = client.patch("/api/portfolio", headers=registered, json={"title": "Engineer"})

        assert response.status_code == 200
        assert response.json()["firstName"] == "Alice"
        assert response.json()["title"] == "Engineer"

    def test_validation_error_returns_400(
        self, client: TestClient, registered: dict[str, str]
    ) -> None:
        response = client.patch(
            "/api/portfolio", headers=registered, json={"skills": ["Go", "Go"]}
        )

        assert response.status_code == 400
        assert response.json()["fields"] == ["skills"]

    def test_unknown_field_returns_400(
        self, client: TestClient, registered: dict[str, str]
    ) -> None:
        response = client.patch("/api/portfolio", headers=registered, json={"nickname": "Al"})
        assert response.status_code == 400

    def test_non_object_body_returns_422(
        self, client: TestClient, registered: dict[str, str]
    ) -> None:
        response = client.patch("/api/portfolio", headers=registered, json=["firstName"])
        assert response.status_code == 422


class TestTheme:
    def test_set_theme(self, client: TestClient, registered: dict[str, str]) -> None:
        response = client.put("/api/portfolio/theme/elegant", headers=registered)

        assert response.status_code == 200
        assert response.json()["theme"] == "elegant"

    def test_unknown_theme(self, client: TestClient, registered: dict[str, str]) -> None:
        response = client.put("/api/portfolio/theme/neon", headers=registered)

        assert response.status_code == 400
        assert response.json()["fields"] == ["theme"]
        assert client.get("/api/portfolio", headers=registered).json()["theme"] == "minimal"

    def test_list_themes(self, client: TestClient) -> None:
        themes = client.get("/api/portfolio/themes").json()
        assert [t["id"] for t in themes] == [
            "minimal",
            "tech",
            "creative",
            "elegant",
            "nature",
            "modern",
        ]


class TestRendering:
    def test_preview_html(self, client: TestClient, registered: dict[str, str]) -> None:
        client.put("/api/portfolio/theme/tech", headers=registered)
        client.patch(
            "/api/portfolio",
            headers=registered,
            json={"firstName": "Alice", "lastName": "Doe", "title": "Engineer"},
        )

        response = client.get("/api/portfolio/preview", headers=registered)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Alice Doe" in response.text
        assert "#0f172a" in response.text

    def test_print_html(self, client: TestClient, registered: dict[str, str]) -> None:
        response = client.get("/api/portfolio/print", headers=registered)

        assert response.status_code == 200
        assert "window.print()" in response.text


class TestPublishing:
    def test_public_view_requires_publish(
        self, client: TestClient, registered: dict[str, str]
    ) -> None:
        assert client.get("/api/portfolio/public/alice").status_code == 404

        published = client.post("/api/portfolio/publish", headers=registered)
        assert published.json()["isPublished"] is True

        response = client.get("/api/portfolio/public/alice")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")

    def test_unpublish_hides_page(self, client: TestClient, registered: dict[str, str]) -> None:
        client.post("/api/portfolio/publish", headers=registered)
        client.post("/api/portfolio/unpublish", headers=registered)

        assert client.get("/api/portfolio/public/alice").status_code == 404

    def test_public_view_unknown_user(self, client: TestClient) -> None:
        assert client.get("/api/portfolio/public/nobody").status_code == 404


class TestSample:
    def test_default_sample(self, client: TestClient, registered: dict[str, str]) -> None:
        response = client.post("/api/portfolio/sample", headers=registered)

        assert response.status_code == 200
        assert response.json()["firstName"] == "Alex"

    def test_named_sample_with_theme(
        self, client: TestClient, registered: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/portfolio/sample",
            headers=registered,
            json={"profile": "developer", "theme": "modern"},
        )

        body = response.json()
        assert body["firstName"] == "Taylor"
        assert body["theme"] == "modern"

    def test_unknown_profile(self, client: TestClient, registered: dict[str, str]) -> None:
        response = client.post(
            "/api/portfolio/sample", headers=registered, json={"profile": "astronaut"}
        )
        assert response.status_code == 400
