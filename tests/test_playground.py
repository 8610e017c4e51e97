from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from lucide_icons import icons_generated
from lucide_icons.config import PROJECT_ROOT
from lucide_icons.playground import app


@pytest.fixture
def client(monkeypatch) -> TestClient:
    monkeypatch.setenv("LUCIDE_ASSETS_ROOT", str(PROJECT_ROOT))
    return TestClient(app)


def test_health(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_gallery_lists_every_icon(client: TestClient) -> None:
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert r.text.count('class="tile"') == icons_generated.count()
    assert 'data-name="arrow-left"' in r.text


def test_icons_json(client: TestClient) -> None:
    body = client.get("/icons").json()
    assert body["count"] == icons_generated.count()
    assert body["icons"][0] == {"identifier": "ArrowLeft", "name": "arrow-left", "path": "icons/arrow-left.svg"}


def test_icon_svg(client: TestClient) -> None:
    r = client.get("/icons/heart.svg", params={"size": "xlarge", "color": "#1F4E79", "rotate": 90})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("image/svg+xml")
    assert 'width="2rem"' in r.text
    assert "color:#1F4E79" in r.text
    assert "rotate(1.5708rad)" in r.text


def test_unknown_icon_is_404(client: TestClient) -> None:
    assert client.get("/icons/does-not-exist.svg").status_code == 404


@pytest.mark.parametrize("params", [{"size": "huge"}, {"color": "red;x"}])
def test_bad_visual_params_are_400(client: TestClient, params: dict) -> None:
    assert client.get("/icons/heart.svg", params=params).status_code == 400


def test_missing_asset_is_500(client: TestClient, tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("LUCIDE_ASSETS_ROOT", str(tmp_path))
    assert client.get("/icons/heart.svg").status_code == 500


def test_gallery_defaults_to_large_icons(client: TestClient) -> None:
    r = client.get("/")
    assert r.text.count('width="1.5rem" height="1.5rem"') == icons_generated.count()
    assert "transform:rotate" not in r.text
    assert '<a href="/?size=large" class="active">large</a>' in r.text
    assert 'class="glyph"' in r.text


def test_gallery_applies_visual_params_to_every_tile(client: TestClient) -> None:
    r = client.get("/", params={"size": "xlarge", "color": "#e11d48", "rotate": 90})
    assert r.status_code == 200
    total = icons_generated.count()
    assert r.text.count('width="2rem" height="2rem"') == total
    assert r.text.count("color:#e11d48") == total
    assert r.text.count("transform:rotate(1.5708rad)") == total


def test_gallery_preset_links_keep_other_params(client: TestClient) -> None:
    text = client.get("/", params={"size": "xlarge", "color": "#e11d48", "rotate": 90}).text
    assert 'href="/?size=small&amp;color=%23e11d48&amp;rotate=90"' in text
    assert 'href="/?size=xlarge&amp;color=%2316a34a&amp;rotate=90"' in text
    assert 'href="/?size=xlarge&amp;color=%23e11d48&amp;rotate=45"' in text
    assert 'href="/?size=xlarge&amp;color=%23e11d48"' in text
    assert 'href="/?size=xlarge&amp;rotate=90"' in text
    for deg in (0, 45, 90, 180, 270):
        assert f">{deg}°</a>" in text
    assert 'class="active">90°</a>' in text
    assert 'class="active">#e11d48</a>' in text


@pytest.mark.parametrize("params", [{"size": "huge"}, {"color": "red;x"}, {"color": 'red" onload="x'}])
def test_gallery_bad_visual_params_are_400(client: TestClient, params: dict) -> None:
    assert client.get("/", params=params).status_code == 400
