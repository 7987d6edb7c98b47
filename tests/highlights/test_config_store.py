"""Tests for the highlights configuration store."""

from menu_admin.highlights.config_store import HighlightsConfigStore
from menu_admin.highlights.types import HighlightsConfig


def test_defaults():
    config = HighlightsConfigStore().config
    assert config.id == 1
    assert config.title == "Especiais do Dia"
    assert config.description == "Ofertas especiais selecionadas para cada dia da semana"
    assert config.active is True


def test_update_config_merges_and_stamps():
    store = HighlightsConfigStore()
    before = store.config

    result = store.update_config({"title": "  Promoções da Semana  "})

    assert result.success
    assert result.data.title == "Promoções da Semana"
    assert result.data.description == before.description
    assert result.data.created_at == before.created_at
    assert result.data.updated_at >= before.updated_at


def test_short_title_is_rejected_and_state_kept():
    store = HighlightsConfigStore()
    result = store.update_config({"title": "ab", "description": "Nova"})

    assert not result.success
    assert result.error_code == "ValidationError"
    assert "title" in result.errors
    assert store.config.title == "Especiais do Dia"
    assert store.config.description == "Ofertas especiais selecionadas para cada dia da semana"


def test_all_field_errors_are_reported():
    store = HighlightsConfigStore()
    result = store.update_config({"title": "", "description": "x" * 201})

    assert result.errors["title"] == "Title is required"
    assert "description" in result.errors


def test_long_title_is_rejected():
    result = HighlightsConfigStore().update_config({"title": "x" * 51})
    assert result.errors["title"] == "Title must have at most 50 characters"


def test_read_only_fields_are_rejected():
    store = HighlightsConfigStore()
    result = store.update_config({"id": 2, "createdAt": "2020-01-01"})

    assert not result.success
    assert set(result.errors) == {"id", "createdAt"}
    assert store.config.id == 1


def test_description_can_be_cleared():
    store = HighlightsConfigStore()
    assert store.update_config({"description": None}).success
    assert store.config.description == ""


def test_toggle_active():
    store = HighlightsConfigStore()
    assert store.toggle_active().data.active is False
    assert store.toggle_active().data.active is True


def test_toggle_active_leaves_other_fields_alone():
    store = HighlightsConfigStore(HighlightsConfig(title="ab", description="Curta"))
    before = store.config

    result = store.toggle_active()

    assert result.success
    assert result.data.active is False
    assert result.data.title == "ab"
    assert result.data.description == "Curta"
    assert result.data.updated_at >= before.updated_at


def test_reset_restores_defaults():
    store = HighlightsConfigStore()
    store.update_config({"title": "Happy Hour", "active": False})

    result = store.reset()

    assert result.data.title == "Especiais do Dia"
    assert result.data.active is True


def test_returned_config_is_a_copy():
    store = HighlightsConfigStore()
    config = store.config
    config.title = "Changed outside"
    assert store.config.title == "Especiais do Dia"
