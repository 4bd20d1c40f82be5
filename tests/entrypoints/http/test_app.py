"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health, search API, pages)
- End-to-end requests against the demo catalog
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_search.entrypoints.http.app import build_app


@pytest.fixture(autouse=True)
def demo_catalog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Serve the in-memory demo catalog with the default page size."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("SEARCH_PAGE_SIZE", raising=False)


@pytest.fixture
def client() -> TestClient:
    return TestClient(build_app())


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    assert build_app() is not build_app()


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Vehicle Search API"
    assert app.version == "0.1.0"
    assert "Vehicle search" in app.description
    assert app.license_info == {"name": "Proprietary"}


def test_app_documentation_urls() -> None:
    app = build_app()

    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_app_documentation_endpoints_are_accessible(client: TestClient) -> None:
    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_has_routes_registered() -> None:
    paths = build_app().openapi()["paths"]

    assert "/health" in paths
    assert "/api/search" in paths
    assert "/search" in paths
    assert "/search/results" in paths
    assert "/" not in paths  # redirect is hidden from the schema


def test_openapi_documents_search_parameters() -> None:
    search_path = build_app().openapi()["paths"]["/api/search"]["get"]

    assert search_path["tags"] == ["Search"]
    assert search_path["summary"] == "Search vehicles"
    assert [p["name"] for p in search_path["parameters"]] == ["q", "page", "sort"]
    assert all(p["required"] is False for p in search_path["parameters"])


def test_openapi_uses_camel_case_flags() -> None:
    schemas = build_app().openapi()["components"]["schemas"]
    response_schema = next(
        schema for name, schema in schemas.items() if name.startswith("SearchResponseDTO")
    )

    assert "hasPrev" in response_schema["properties"]
    assert "hasNext" in response_schema["properties"]


# ==============================================================================
# End-to-end against the demo catalog
# ==============================================================================


def test_health_endpoint_responds(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_api_search_default_state(client: TestClient) -> None:
    response = client.get("/api/search")

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == {"q": "", "page": 1, "sort": "relevance"}
    assert data["total"] == 15
    assert len(data["results"]) == 5
    assert data["hasPrev"] is False
    assert data["hasNext"] is True


def test_api_search_second_page_by_price(client: TestClient) -> None:
    response = client.get("/api/search", params={"page": "2", "sort": "price_asc"})

    data = response.json()
    assert [r["id"] for r in data["results"]] == ["2", "9", "3", "10", "12"]
    assert data["hasPrev"] is True
    assert data["hasNext"] is True


def test_api_search_honda(client: TestClient) -> None:
    data = client.get("/api/search?q=honda").json()

    assert data["total"] == 1
    assert data["results"][0] == {
        "id": "1",
        "title": "2023 Honda Civic",
        "price": "25000.00",
        "description": "Reliable sedan with great fuel economy",
    }


def test_api_search_normalizes_malformed_input(client: TestClient) -> None:
    response = client.get("/api/search?page=abc&sort=cheapest")

    assert response.status_code == 200
    assert response.json()["state"] == {"q": "", "page": 1, "sort": "relevance"}


def test_page_size_comes_from_environment(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SEARCH_PAGE_SIZE", "4")

    data = client.get("/api/search?page=4").json()

    assert [r["id"] for r in data["results"]] == ["13", "14", "15"]
    assert data["hasNext"] is False


def test_search_page_renders(client: TestClient) -> None:
    response = client.get("/search?q=suv")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Found 3 results" in response.text


def test_root_redirects_to_search(client: TestClient) -> None:
    response = client.get("/", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/search"


def test_app_returns_404_for_unknown_routes(client: TestClient) -> None:
    assert client.get("/unknown").status_code == 404
