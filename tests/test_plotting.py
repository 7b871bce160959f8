from types import SimpleNamespace

import pytest
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Rectangle

from pedchart.models import DECEASED, Bounds
from pedchart.plotting import MatplotlibRenderer, _linestyle, plot_layout


@pytest.fixture
def layout(engine, family):
    individuals, couples = family
    return engine.calculate_tree_layout(individuals, couples)


@pytest.fixture
def renderer():
    renderer = MatplotlibRenderer()
    renderer.initialize()
    yield renderer
    renderer.cleanup()


def test_render_draws_one_symbol_per_individual(renderer, layout):
    renderer.render(layout)

    assert set(renderer.symbol_artists) == {i.id for i in layout.individuals()}
    assert isinstance(renderer.symbol_artists["father-001"], Rectangle)
    assert isinstance(renderer.symbol_artists["mother-001"], Circle)
    assert renderer.symbol_artists["mother-001"].center == (110, 50)
    assert renderer.ax.get_xlim() == (0, 380)
    assert renderer.ax.get_ylim() == (260, 0)


def test_connection_lines_are_drawn(renderer, layout):
    renderer.render(layout)
    gids = {line.get_gid() for line in renderer.ax.get_lines()}
    assert {c.id for c in layout.connections} <= gids


def test_deceased_individual_gets_strike_through(renderer, engine, family):
    individuals, couples = family
    individuals[2].medical_status.life_status = DECEASED
    before = len(renderer.ax.get_lines())
    layout = engine.calculate_tree_layout(individuals, couples)
    renderer.render(layout)
    assert len(renderer.ax.get_lines()) == before + len(layout.connections) + 1


def test_pick_selects_individual(renderer, layout):
    selected = []
    renderer.render(layout, selected.append)

    artist = renderer.symbol_artists["child-002"]
    assert artist.get_picker()
    renderer.figure.canvas.callbacks.process("pick_event", SimpleNamespace(artist=artist))
    assert [i.id for i in selected] == ["child-002"]


def test_zoom_to_region(renderer, layout):
    renderer.render(layout)
    renderer.zoom_to_region(Bounds(min_x=50, max_x=330, min_y=50, max_y=210), 20)
    assert renderer.ax.get_xlim() == (30, 350)
    assert renderer.ax.get_ylim() == (230, 30)


def test_export_vector_document(renderer, layout):
    renderer.render(layout)
    svg = renderer.export_vector_document()
    assert "<svg" in svg
    assert 'id="father-001"' in svg


def test_export_before_initialize_is_empty():
    assert MatplotlibRenderer().export_vector_document() == ""


def test_render_before_initialize_raises(layout):
    with pytest.raises(RuntimeError):
        MatplotlibRenderer().render(layout)


def test_initialize_on_existing_axes(layout):
    ax = Figure().add_subplot()
    renderer = MatplotlibRenderer()
    renderer.initialize(ax)
    renderer.render(layout)
    assert renderer.ax is ax
    assert len(ax.patches) == 5


def test_cleanup_detaches(renderer, layout):
    renderer.render(layout, lambda individual: None)
    renderer.cleanup()
    assert renderer.ax is None
    assert renderer.symbol_artists == {}
    assert renderer.export_vector_document() == ""


@pytest.mark.parametrize(
    "dasharray, expected",
    [(None, "solid"), ("5,5", (0, (5.0, 5.0))), ("4 2 1", (0, (4.0, 2.0, 1.0)))],
)
def test_linestyle(dasharray, expected):
    assert _linestyle(dasharray) == expected


def test_plot_layout_writes_file(layout, tmp_path, capsys):
    output = tmp_path / "chart.svg"
    plot_layout(layout, output)
    assert output.read_text().lstrip().startswith("<?xml")
    assert "Pedigree saved to" in capsys.readouterr().out
