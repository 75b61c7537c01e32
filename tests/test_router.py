"""Tests API FastAPI (TestClient)."""
import pytest
from fastapi.testclient import TestClient

from page_studio import EditorSession, StudioConfig
from page_studio.fastapi_integration import create_app


@pytest.fixture
def session():
    return EditorSession.with_starter_page(config=StudioConfig())


@pytest.fixture
def client(session):
    return TestClient(create_app(session=session, config=StudioConfig()))


def ids_of(payload):
    return [b["instance_id"] for b in payload["blocks"]]


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_catalog(client):
    blocks = client.get("/page-studio/catalog").json()["blocks"]
    assert len(blocks) == 16
    assert blocks[0]["block_type"] == "navigation"
    assert "properties" in blocks[0]["schema"]


def test_document(client):
    data = client.get("/page-studio/document").json()
    assert ids_of(data) == ["nav-init", "hero-init"]
    assert data["selected_id"] == "hero-init"


def test_add_block(client):
    r = client.post("/page-studio/blocks", json={"kind": "faq"})
    assert r.status_code == 200
    data = r.json()
    assert ids_of(data)[-1] == data["instance_id"]
    assert data["selected_id"] == data["instance_id"]
    assert data["can_undo"] is True


def test_add_unknown_kind(client):
    assert client.post("/page-studio/blocks", json={"kind": "carousel"}).status_code == 422


def test_move_undo_redo(client):
    data = client.post("/page-studio/blocks/hero-init/move", json={"direction": "up"}).json()
    assert ids_of(data) == ["hero-init", "nav-init"]
    assert ids_of(client.post("/page-studio/undo").json()) == ["nav-init", "hero-init"]
    data = client.post("/page-studio/redo").json()
    assert ids_of(data) == ["hero-init", "nav-init"]
    assert data["can_redo"] is False


def test_update_block(client, session):
    block = session.selected.model_copy(update={"anchor_id": "top"})
    r = client.put("/page-studio/blocks/hero-init", json={"block": block.model_dump(mode="json")})
    assert r.status_code == 200
    assert r.json()["blocks"][1]["anchor_id"] == "top"
    assert session.document.blocks[1].anchor_id == "top"


def test_update_block_id_mismatch(client, session):
    block = session.selected.model_copy(update={"instance_id": "other"})
    r = client.put("/page-studio/blocks/hero-init", json={"block": block.model_dump(mode="json")})
    assert r.status_code == 400
    assert not session.history.can_undo


def test_duplicate_and_delete(client):
    data = client.post("/page-studio/blocks/nav-init/duplicate").json()
    assert ids_of(data) == ["nav-init", data["instance_id"], "hero-init"]
    data = client.delete("/page-studio/blocks/hero-init").json()
    assert data["selected_id"] is None
    assert len(data["blocks"]) == 2


def test_delete_missing_block_is_noop(client):
    data = client.delete("/page-studio/blocks/missing").json()
    assert ids_of(data) == ["nav-init", "hero-init"]
    assert data["can_undo"] is False


def test_export_html(client):
    r = client.get("/page-studio/export/html")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert r.headers["content-disposition"] == 'attachment; filename="index.html"'
    assert r.text.startswith("<!DOCTYPE html>")


def test_export_component(client):
    r = client.get("/page-studio/export/component")
    assert r.headers["content-disposition"] == 'attachment; filename="Page.tsx"'
    assert "export default Page;" in r.text


def test_export_unknown_target(client):
    assert client.get("/page-studio/export/pdf").status_code == 422


def test_settings(client, session):
    assert client.get("/page-studio/settings").json()["title"] == "My Awesome Site"
    r = client.put("/page-studio/settings", json={"title": "Studio", "font_family": "serif"})
    assert r.status_code == 200
    assert r.json()["font_family"] == "serif"
    assert session.settings.title == "Studio"
    assert client.put("/page-studio/settings", json={"font_family": "comic"}).status_code == 422
    assert "<title>Studio</title>" in client.get("/page-studio/export/html").text


def test_preferences(client):
    r = client.put("/page-studio/preferences", json={"dark_mode": True})
    assert r.json()["dark_mode"] is True
    assert client.get("/page-studio/preferences").json()["language"] == "en"


def test_export_component_uses_configured_name():
    session = EditorSession.with_starter_page(config=StudioConfig(component_name="Home"))
    client = TestClient(create_app(session=session, config=StudioConfig()))
    r = client.get("/page-studio/export/component")
    assert r.headers["content-disposition"] == 'attachment; filename="Home.tsx"'
    assert "export default Home;" in r.text
