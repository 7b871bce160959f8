"""Visualization of computed pedigree layouts with matplotlib."""

import io
import logging
from collections.abc import Callable
from pathlib import Path

from matplotlib.artist import Artist
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Rectangle

from pedchart.config import LayoutConfig
from pedchart.models import DECEASED, Bounds, FamilyConnection, Individual, TreeLayout

logger = logging.getLogger(__name__)

DPI = 100
PROBAND_COLOR = "#dc2626"


def _linestyle(dasharray: str | None):
    """Translate an SVG stroke-dasharray such as "5,5" into a matplotlib dash tuple."""
    if not dasharray:
        return "solid"
    dashes = tuple(float(part) for part in dasharray.replace(",", " ").split())
    return (0, dashes)


class MatplotlibRenderer:
    """
    Paints a TreeLayout onto a matplotlib Axes.

    Positions are symbol centres. The y axis is inverted so the oldest generation
    is at the top, like on screen.
    """

    def __init__(self, config: LayoutConfig | None = None):
        self.config = config or LayoutConfig()
        self.figure: Figure | None = None
        self.ax: Axes | None = None
        self.symbol_artists: dict[str, Artist] = {}
        self._individual_by_artist: dict[Artist, Individual] = {}
        self._pick_cid: int | None = None

    def initialize(self, surface: Axes | None = None):
        """Attach to `surface`, or to a new figure sized after the configured canvas."""
        if surface is None:
            canvas = self.config.canvas
            figure = Figure(figsize=(canvas.width / DPI, canvas.height / DPI), dpi=DPI)
            surface = figure.add_subplot()
        self.ax = surface
        self.figure = surface.figure
        self.ax.clear()
        self.ax.set_facecolor("#f8f9fa")

    def render(
        self,
        layout: TreeLayout,
        on_individual_selected: Callable[[Individual], None] | None = None,
    ):
        """
        Draw every connection, then every individual symbol.

        When `on_individual_selected` is given, picking a symbol calls it with the
        corresponding individual.
        """
        if self.ax is None:
            raise RuntimeError("Renderer not initialized; call initialize() first")

        self._disconnect()
        self.symbol_artists.clear()
        self._individual_by_artist.clear()
        ax = self.ax
        ax.clear()

        ax.set_xlim(0, layout.canvas_size.width)
        ax.set_ylim(layout.canvas_size.height, 0)
        ax.set_aspect("equal")
        ax.axis("off")

        for connection in layout.connections:
            self._draw_connection(connection)
        for individual in layout.individuals():
            self._draw_individual(individual, pickable=on_individual_selected is not None)

        if on_individual_selected is not None:

            def on_pick(event):
                individual = self._individual_by_artist.get(event.artist)
                if individual is not None:
                    on_individual_selected(individual)

            self._pick_cid = self.figure.canvas.mpl_connect("pick_event", on_pick)

        logger.debug(
            "Rendered %d connections and %d symbols",
            len(layout.connections),
            len(self.symbol_artists),
        )

    def zoom_to_region(self, bounds: Bounds, padding_px: float = 20):
        if self.ax is None:
            return
        self.ax.set_xlim(bounds.min_x - padding_px, bounds.max_x + padding_px)
        self.ax.set_ylim(bounds.max_y + padding_px, bounds.min_y - padding_px)

    def export_vector_document(self) -> str:
        """Return the current drawing as SVG text (empty before initialize())."""
        if self.figure is None:
            return ""
        buffer = io.StringIO()
        self.figure.savefig(buffer, format="svg")
        return buffer.getvalue()

    def cleanup(self):
        self._disconnect()
        if self.ax is not None:
            self.ax.clear()
        self.symbol_artists.clear()
        self._individual_by_artist.clear()
        self.ax = None
        self.figure = None

    def _disconnect(self):
        if self._pick_cid is not None and self.figure is not None:
            self.figure.canvas.mpl_disconnect(self._pick_cid)
        self._pick_cid = None

    def _draw_connection(self, connection: FamilyConnection):
        points = connection.path.points
        if len(points) < 2:
            return
        style = connection.path.style
        (line,) = self.ax.plot(
            [p.x for p in points],
            [p.y for p in points],
            color=style.stroke,
            linewidth=style.stroke_width,
            linestyle=_linestyle(style.stroke_dasharray),
            solid_capstyle="butt",
            zorder=1,
        )
        line.set_gid(connection.id)

    def _draw_individual(self, individual: Individual, pickable: bool):
        ax = self.ax
        symbol = individual.layout.symbol
        size = individual.layout.size or self.config.symbols.size
        half = size / 2
        x, y = individual.layout.position.x, individual.layout.position.y

        style = {
            "facecolor": "#000000" if symbol.fill == "filled" else "#ffffff",
            "edgecolor": "#000000",
            "linewidth": self.config.symbols.stroke_width,
            "picker": pickable,
            "zorder": 2,
        }
        if symbol.shape == "square":
            artist = Rectangle((x - half, y - half), size, size, **style)
        else:
            artist = Circle((x, y), half, **style)
        artist.set_gid(individual.id)
        ax.add_patch(artist)
        self.symbol_artists[individual.id] = artist
        self._individual_by_artist[artist] = individual

        if symbol.status == DECEASED:
            ax.plot([x - half, x + half], [y + half, y - half], color="#000000", linewidth=2, zorder=3)

        ax.text(x, y + half + 15, individual.first_name, ha="center", va="center", fontsize=9)
        if individual.age is not None:
            ax.text(x, y + half + 30, f"{individual.age} y", ha="center", va="center", fontsize=7.5)

        if individual.medical_status.is_proband:
            ax.text(
                x + half + 5,
                y - half - 5,
                "→",
                color=PROBAND_COLOR,
                fontsize=10.5,
                fontweight="bold",
            )


def plot_layout(layout: TreeLayout, output_path: Path | None = None, config: LayoutConfig | None = None):
    """
    Plot a computed pedigree layout.

    Args:
        layout: Result of GenealogyEngine.calculate_tree_layout
        output_path: Path to save the chart (png, svg or pdf). If None, displays interactively.
        config: Layout configuration used to size symbols and strokes.
    """
    renderer = MatplotlibRenderer(config)

    if output_path:
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"

        renderer.initialize()
        renderer.render(layout)
        renderer.figure.savefig(str(output_path), format=ext)
        print(f"Pedigree saved to {output_path}")
        renderer.cleanup()
    else:
        import matplotlib.pyplot as plt

        canvas = renderer.config.canvas
        _, ax = plt.subplots(figsize=(canvas.width / DPI, canvas.height / DPI), dpi=DPI)
        renderer.initialize(ax)
        renderer.render(layout)
        plt.tight_layout()
        plt.show()
