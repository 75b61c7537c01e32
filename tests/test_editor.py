"""Tests session d'édition — historique, sélection, réglages, export."""
import pytest
from pydantic import ValidationError

from page_studio import EditorSession, StudioConfig
from page_studio.blocks import HeroSeed


@pytest.fixture
def session():
    return EditorSession.with_starter_page(config=StudioConfig())


def kinds(session):
    return [b.block_type for b in session.document.blocks]


def test_starter_page(session):
    assert kinds(session) == ["navigation", "hero"]
    assert session.document.instance_ids == ("nav-init", "hero-init")
    assert session.selected_id == "hero-init"
    assert session.selected.block_type == "hero"
    assert not session.history.can_undo


def test_add_move_undo_redo(session):
    pricing_id = session.add_block("pricing")
    assert kinds(session) == ["navigation", "hero", "pricing"]
    assert session.selected_id == pricing_id

    assert session.move_block(pricing_id, "up")
    assert kinds(session) == ["navigation", "pricing", "hero"]

    assert session.undo()
    assert kinds(session) == ["navigation", "hero", "pricing"]
    assert session.redo()
    assert kinds(session) == ["navigation", "pricing", "hero"]
    assert not session.redo()


def test_noop_mutations_are_not_recorded(session):
    assert not session.move_block("nav-init", "up")
    assert not session.move_block("missing", "down")
    assert not session.delete_block("missing")
    assert not session.history.can_undo


def test_update_block(session):
    hero = session.selected.model_copy(update={"seed": HeroSeed(heading="Bonjour")})
    assert session.update_block("hero-init", hero)
    assert session.document.blocks[1].seed.heading == "Bonjour"
    assert session.document.blocks[1].instance_id == "hero-init"
    assert not session.update_block("hero-init", hero)


def test_delete_clears_selection(session):
    assert session.delete_block("hero-init")
    assert session.selected_id is None
    assert session.selected is None
    assert kinds(session) == ["navigation"]


def test_delete_other_keeps_selection(session):
    session.delete_block("nav-init")
    assert session.selected_id == "hero-init"


def test_duplicate(session):
    new_id = session.duplicate_block("hero-init")
    blocks = session.document.blocks
    assert new_id not in ("nav-init", "hero-init")
    assert [b.instance_id for b in blocks] == ["nav-init", "hero-init", new_id]
    assert blocks[2].seed == blocks[1].seed
    assert session.duplicate_block("missing") is None


def test_settings_are_not_in_history(session):
    session.add_block("faq")
    session.undo()
    settings = session.update_settings(title="Nouveau titre", primary_color="#000000")
    assert settings.title == "Nouveau titre"
    assert session.settings.font_family == "sans"
    assert session.history.can_redo
    assert not session.history.can_undo


def test_invalid_settings_rejected(session):
    with pytest.raises(ValidationError):
        session.update_settings(font_family="comic")
    assert session.settings.font_family == "sans"


def test_preferences(session):
    prefs = session.update_preferences(dark_mode=True, language="fr")
    assert prefs.dark_mode and prefs.language == "fr"
    assert not session.history.can_undo


def test_state(session):
    state = session.state()
    assert state["selected_id"] == "hero-init"
    assert [b["block_type"] for b in state["blocks"]] == ["navigation", "hero"]
    assert state["can_undo"] is False and state["can_redo"] is False


def test_export_uses_configured_component_name():
    session = EditorSession.with_starter_page(config=StudioConfig(component_name="Landing"))
    artifact = session.export("component")
    assert artifact.filename == "Landing.tsx"
    assert "export default Landing;" in artifact.content
    assert session.export("html").content.count("<section ") == 2


def test_history_limit():
    session = EditorSession(config=StudioConfig(history_limit=1))
    session.add_block("hero")
    session.add_block("cta")
    assert session.undo()
    assert not session.undo()
    assert kinds(session) == ["hero"]
