from types import SimpleNamespace

import pytest

from pedchart.models import AFFECTED, DECEASED
from pedchart.store import GenealogyStore

from conftest import person


@pytest.fixture
def store():
    store = GenealogyStore()
    store.initialize_engine()
    yield store
    store.cleanup()


def test_store_starts_with_sample_family():
    store = GenealogyStore()
    assert len(store.individuals) == 5
    assert len(store.couples) == 1
    assert store.layout is None


def test_initialize_computes_layout_and_validation(store):
    assert store.error is None
    assert store.layout is not None
    assert store.layout.canvas_size.width == 380
    assert store.validation.is_valid


def test_update_layout_without_engine_is_a_no_op():
    store = GenealogyStore()
    store.update_layout()
    assert store.layout is None


def test_update_individual_relayouts(store):
    previous = store.layout
    store.update_individual("child-003", first_name="Luc", age=13)

    lucas = store.get_individual_by_id("child-003")
    assert lucas.first_name == "Luc"
    assert lucas.age == 13
    assert store.layout is not previous
    assert store.layout.find_individual("child-003") is lucas


def test_medical_status_update_changes_symbol(store):
    store.update_individual_medical_status("father-001", "health_status", AFFECTED)
    store.update_individual_medical_status("father-001", "life_status", DECEASED)

    father = store.get_individual_by_id("father-001")
    assert father.layout.symbol.fill == "filled"
    assert father.layout.symbol.status == DECEASED


def test_update_unknown_individual_raises(store):
    with pytest.raises(ValueError):
        store.update_individual("ghost", age=3)
    with pytest.raises(ValueError):
        store.update_individual_medical_status("ghost", "health_status", AFFECTED)


def test_failed_layout_keeps_previous_layout(store):
    previous_layout = store.layout
    previous_validation = store.validation

    store.individuals.append(person("loop", parents=["loop"]))
    store.update_layout()

    assert store.error.startswith("Layout error: Cycle detected")
    assert store.layout is previous_layout
    assert store.validation is previous_validation


def test_auto_update_off_defers_layout():
    store = GenealogyStore(auto_update=False)
    store.initialize_engine()
    previous = store.layout
    store.update_individual("child-001", age=19)
    assert store.layout is previous
    store.update_layout()
    assert store.layout is not previous


def test_selection(store):
    assert store.selected_individual is None
    store.select_individual("mother-001")
    assert store.selected_individual.first_name == "Marie"
    store.select_individual(None)
    assert store.selected_individual is None


def test_clicking_a_symbol_selects_individual(store):
    artist = store.renderer.symbol_artists["child-002"]
    store.renderer.figure.canvas.callbacks.process("pick_event", SimpleNamespace(artist=artist))
    assert store.selected_individual_id == "child-002"


def test_reset_to_sample_data(store):
    store.update_individual("child-001", first_name="Changed")
    store.select_individual("child-001")
    store.reset_to_sample_data()
    assert store.get_individual_by_id("child-001").first_name == "Paul"
    assert store.selected_individual_id is None
    assert store.layout is not None


def test_export_and_zoom(store):
    assert "<svg" in store.export_svg()
    store.zoom_to_fit()
    assert store.renderer.ax.get_xlim() == (30, 350)


@pytest.mark.parametrize(
    "config",
    [{"symbols": {"size": -1}}, {"symbols": {"size": float("nan")}}, "oops", [("symbols", {})]],
)
def test_bad_config_records_error(config):
    store = GenealogyStore()
    store.initialize_engine(config=config)
    assert store.error.startswith("Initialization error")
    assert store.engine is None


def test_cleanup_resets_store(store):
    store.cleanup()
    assert store.engine is None
    assert store.renderer is None
    assert store.layout is None
    assert store.export_svg() == ""
