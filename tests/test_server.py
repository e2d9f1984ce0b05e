"""Tests for the HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from blogdoc.config import BLOGDOC_FALLBACK_MESSAGE
import server.__main__ as server_main
from server.main import app
from helpers import nesting_chain, parse_html


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestRenderEndpoint:
    """Tests for POST /api/render."""

    def test_full(self, client: TestClient, heading_content: str) -> None:
        response = client.post("/api/render", json={"content": heading_content})
        assert response.status_code == 200
        body = response.json()
        assert body["mode"] == "full"
        assert body["parsed"] is True
        assert nesting_chain(parse_html(body["output"]).find("h1")) == ["h1", "em", "strong"]

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [("excerpt", "Hello"), ("markdown", "# ***Hello***"), ("MARKDOWN", "# ***Hello***")],
    )
    def test_text_modes(self, client: TestClient, heading_content: str, mode: str, expected: str) -> None:
        response = client.post("/api/render", json={"content": heading_content, "mode": mode})
        assert response.status_code == 200
        assert response.json()["output"] == expected

    def test_preview(self, client: TestClient, heading_content: str) -> None:
        response = client.post("/api/render", json={"content": heading_content, "mode": "preview"})
        assert parse_html(response.json()["output"]).find("div")["class"] == ["blog-preview"]

    @pytest.mark.parametrize("mode", ["", None])
    def test_empty_mode_is_full(self, client: TestClient, heading_content: str, mode: str | None) -> None:
        response = client.post("/api/render", json={"content": heading_content, "mode": mode})
        assert response.status_code == 200
        assert response.json()["mode"] == "full"

    def test_fallback(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"content": "{not json"})
        assert response.status_code == 200
        body = response.json()
        assert body["parsed"] is False
        assert parse_html(body["output"]).get_text() == BLOGDOC_FALLBACK_MESSAGE

    def test_unknown_theme(self, client: TestClient, heading_content: str) -> None:
        response = client.post("/api/render", json={"content": heading_content, "theme": "missing"})
        assert response.status_code == 400
        assert "missing" in response.json()["detail"]

    def test_invalid_mode(self, client: TestClient, heading_content: str) -> None:
        response = client.post("/api/render", json={"content": heading_content, "mode": "pdf"})
        assert response.status_code == 422

    def test_negative_excerpt_length(self, client: TestClient, heading_content: str) -> None:
        response = client.post("/api/render", json={"content": heading_content, "excerpt_length": -1})
        assert response.status_code == 422

    def test_missing_content(self, client: TestClient) -> None:
        assert client.post("/api/render", json={}).status_code == 422


class TestLegacyEndpoint:
    """Tests for POST /api/legacy."""

    def test_convert(self, client: TestClient) -> None:
        response = client.post("/api/legacy", json={"content": "**hi**"})
        assert response.status_code == 200
        assert response.json() == {"output": "<p><strong>hi</strong></p>"}

    def test_nul_in_content(self, client: TestClient) -> None:
        response = client.post("/api/legacy", json={"content": "a \u0000B3\u0000 b"})
        assert response.status_code == 200
        assert response.json() == {"output": "<p>a B3 b</p>"}

    def test_empty(self, client: TestClient) -> None:
        assert client.post("/api/legacy", json={}).json() == {"output": ""}


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestLauncher:
    """Tests for ``python -m server``."""

    def test_run_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[tuple, dict]] = []
        monkeypatch.setattr(server_main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("RELOAD", "TRUE")

        server_main.run()

        assert calls == [
            (("server.main:app",), {"host": "127.0.0.1", "port": 9001, "reload": True, "log_config": None})
        ]
