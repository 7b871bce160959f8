"""Presentation state: the canonical family snapshot wired to the engine and a renderer."""

import logging
from dataclasses import replace
from typing import Any

from matplotlib.axes import Axes

from pedchart.errors import PedigreeError
from pedchart.layout import GenealogyEngine
from pedchart.models import Couple, Individual, TreeLayout, ValidationResult
from pedchart.plotting import MatplotlibRenderer
from pedchart.sample_data import basic_family

logger = logging.getLogger(__name__)


class GenealogyStore:
    """
    Owns the individuals and couples of one chart.

    Every mutation re-runs validation and layout (when `auto_update` is on) and
    hands the new layout to the renderer. A failed layout pass records `error`
    and keeps the previous layout and validation in place.
    """

    def __init__(
        self,
        individuals: list[Individual] | None = None,
        couples: list[Couple] | None = None,
        auto_update: bool = True,
    ):
        if individuals is None and couples is None:
            individuals, couples = basic_family()
        self.individuals: list[Individual] = list(individuals or [])
        self.couples: list[Couple] = list(couples or [])
        self.auto_update = auto_update

        self.selected_individual_id: str | None = None
        self.layout: TreeLayout | None = None
        self.validation: ValidationResult | None = None
        self.error: str | None = None

        self.engine: GenealogyEngine | None = None
        self.renderer: MatplotlibRenderer | None = None

    def initialize_engine(self, surface: Axes | None = None, config=None):
        try:
            engine = GenealogyEngine(config)
            renderer = MatplotlibRenderer(engine.config)
            renderer.initialize(surface)
        except PedigreeError as exc:
            self.error = f"Initialization error: {exc}"
            logger.error(self.error)
            return

        self.engine = engine
        self.renderer = renderer
        self.error = None
        self.update_layout()

    def reset_to_sample_data(self):
        self.individuals, self.couples = basic_family()
        self.selected_individual_id = None
        self.layout = None
        self.validation = None
        self.error = None
        self.update_layout()

    def select_individual(self, individual_id: str | None):
        self.selected_individual_id = individual_id

    @property
    def selected_individual(self) -> Individual | None:
        if self.selected_individual_id is None:
            return None
        return self.get_individual_by_id(self.selected_individual_id)

    def get_individual_by_id(self, individual_id: str) -> Individual | None:
        for individual in self.individuals:
            if individual.id == individual_id:
                return individual
        return None

    def update_individual(self, individual_id: str, **changes: Any):
        """Replace fields of one individual, e.g. ``update_individual("p1", age=40)``."""
        individual = self.get_individual_by_id(individual_id)
        if individual is None:
            raise ValueError(f"Individual ID {individual_id} not found")

        updated = replace(individual, **changes)
        if self.engine is not None:
            updated.layout = replace(
                updated.layout, symbol=self.engine.generate_genetic_symbol(updated)
            )
        self.individuals = [updated if i.id == individual_id else i for i in self.individuals]

        if self.auto_update:
            self.update_layout()

    def update_individual_medical_status(self, individual_id: str, field: str, value: Any):
        individual = self.get_individual_by_id(individual_id)
        if individual is None:
            raise ValueError(f"Individual ID {individual_id} not found")
        medical_status = replace(individual.medical_status, **{field: value})
        self.update_individual(individual_id, medical_status=medical_status)

    def update_layout(self):
        """Validate and lay out the current snapshot, then repaint."""
        if self.engine is None or self.renderer is None:
            return

        self.error = None
        try:
            validation = self.engine.validate_genetic_consistency(self.individuals, self.couples)
            layout = self.engine.calculate_tree_layout(self.individuals, self.couples)
            self.renderer.render(layout, lambda individual: self.select_individual(individual.id))
        except PedigreeError as exc:
            self.error = f"Layout error: {exc}"
            logger.error(self.error)
            return

        self.layout = layout
        self.validation = validation

    def export_svg(self) -> str:
        return self.renderer.export_vector_document() if self.renderer else ""

    def zoom_to_fit(self):
        if self.renderer is not None and self.layout is not None:
            self.renderer.zoom_to_region(self.layout.bounds, 20)

    def cleanup(self):
        if self.renderer is not None:
            self.renderer.cleanup()
        self.engine = None
        self.renderer = None
        self.layout = None
