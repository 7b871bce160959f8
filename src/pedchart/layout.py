"""
Pedigree layout engine.

A layout pass runs in five phases over a fresh snapshot of the family:

1. assign every individual a generation and group individuals and couples by level
2. place each level left to right: couples first, then single individuals
3. measure the tree and translate everything so it sits `padding` away from the origin
4. route marriage lines, parent drops and sibling bridges on the final coordinates
5. measure again to size the canvas

Nothing is carried over between passes; the whole tree is recomputed on every call.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pedchart.config import LayoutConfig
from pedchart.graph import assign_generations
from pedchart.models import (
    MARRIAGE,
    PARENT_CHILD,
    SIBLING_BRIDGE,
    Bounds,
    CanvasSize,
    ChildrenConnection,
    ConnectionLine,
    ConnectionPath,
    ConnectionStyle,
    Couple,
    CoupleLayout,
    FamilyConnection,
    Generation,
    GenerationLayout,
    GenerationSpacing,
    GeneticSymbol,
    Individual,
    Position,
    TreeLayout,
    ValidationResult,
)
from pedchart.symbols import generate_genetic_symbol
from pedchart.validation import validate_genetic_consistency

logger = logging.getLogger(__name__)


def calculate_bounds(generations: Iterable[Generation], symbol_size: float) -> Bounds:
    """Tightest box around every symbol footprint; all zeros for an empty tree."""
    xs: list[float] = []
    ys: list[float] = []
    for generation in generations:
        for individual in generation.individuals:
            pos = individual.layout.position
            xs.extend((pos.x, pos.x + symbol_size))
            ys.extend((pos.y, pos.y + symbol_size))

    if not xs:
        return Bounds()
    return Bounds(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))


class GenealogyEngine:
    """
    Computes positioned, centered pedigree layouts.

    Args:
        config: A LayoutConfig, or a partial nested mapping of overrides such as
            ``{"symbols": {"size": 30}}``. Invalid settings raise ConfigError.
    """

    def __init__(self, config: LayoutConfig | Mapping[str, Any] | None = None):
        if config is None:
            config = LayoutConfig()
        elif not isinstance(config, LayoutConfig):
            config = LayoutConfig.from_dict(config)
        self.config = config

    def calculate_tree_layout(
        self, individuals: Sequence[Individual], couples: Iterable[Couple] = ()
    ) -> TreeLayout:
        """
        Lay out a whole pedigree.

        The `layout` records of the given individuals and couples are overwritten.

        Raises:
            CycleError: if the parent graph is cyclic.
        """
        individuals_by_id = {individual.id: individual for individual in individuals}
        couples_by_id = {couple.id: couple for couple in couples}

        generations = self._organize_by_generations(individuals_by_id, couples_by_id.values())
        self._calculate_sequential_layout(generations, individuals_by_id)

        size = self.config.symbols.size
        preliminary_bounds = calculate_bounds(generations, size)
        self._center_tree(generations, preliminary_bounds)

        connections = self._calculate_family_connections(generations, individuals_by_id)

        bounds = calculate_bounds(generations, size)
        padding = self.config.canvas.padding
        canvas_size = CanvasSize(
            width=bounds.width + padding * 2,
            height=bounds.height + padding * 2,
        )
        logger.debug(
            "Laid out %d individuals in %d generations with %d connections",
            len(individuals_by_id),
            len(generations),
            len(connections),
        )
        return TreeLayout(
            generations=generations,
            connections=connections,
            canvas_size=canvas_size,
            bounds=bounds,
        )

    def validate_genetic_consistency(
        self, individuals: Sequence[Individual], couples: Iterable[Couple] | None = None
    ) -> ValidationResult:
        """Check the pedigree for structural errors and missing medical data."""
        return validate_genetic_consistency(individuals, couples)

    def generate_genetic_symbol(self, individual: Individual) -> GeneticSymbol:
        """Symbol drawn for `individual` given its sex and medical status."""
        return generate_genetic_symbol(individual)

    # ------------------------------------------------------------------
    # Phase 1: generations
    # ------------------------------------------------------------------

    def _organize_by_generations(
        self, individuals_by_id: dict[str, Individual], couples: Iterable[Couple]
    ) -> list[Generation]:
        levels = assign_generations(individuals_by_id.values())

        individuals_by_level: dict[int, list[Individual]] = {}
        for individual in individuals_by_id.values():
            level = levels[individual.id]
            individual.layout.generation = level
            individual.layout.size = self.config.symbols.size
            individual.layout.symbol = generate_genetic_symbol(individual)
            individuals_by_level.setdefault(level, []).append(individual)

        couples_by_level: dict[int, list[Couple]] = {level: [] for level in individuals_by_level}
        for couple in couples:
            member1 = individuals_by_id.get(couple.individual1_id)
            member2 = individuals_by_id.get(couple.individual2_id)
            couple.layout = CoupleLayout(generation=member1.layout.generation if member1 else 0)
            if member1 is None or member2 is None:
                logger.warning("Skipping couple %s: member not found", couple.id)
                continue
            if member1.layout.generation != member2.layout.generation:
                logger.warning(
                    "Skipping couple %s: members are in generations %d and %d",
                    couple.id,
                    member1.layout.generation,
                    member2.layout.generation,
                )
                continue

            couples_by_level[couple.layout.generation].append(couple)

        return [
            Generation(
                level=level,
                individuals=individuals_by_level[level],
                couples=couples_by_level[level],
                layout=GenerationLayout(
                    spacing=GenerationSpacing(
                        between_individuals=self.config.symbols.spacing,
                        between_couples=self.config.generations.horizontal_spacing,
                    )
                ),
            )
            for level in sorted(individuals_by_level)
        ]

    # ------------------------------------------------------------------
    # Phase 2: positions
    # ------------------------------------------------------------------

    def _calculate_sequential_layout(
        self, generations: list[Generation], individuals_by_id: dict[str, Individual]
    ):
        current_y = 0.0
        for generation in generations:
            generation.layout.y_position = current_y
            self._position_individuals_in_generation(generation, individuals_by_id)
            generation.layout.total_width = max(
                (i.layout.position.x + self.config.symbols.size for i in generation.individuals),
                default=0.0,
            )
            current_y += self.config.generations.vertical_spacing

    def _position_individuals_in_generation(
        self, generation: Generation, individuals_by_id: dict[str, Individual]
    ):
        symbols = self.config.symbols
        connections = self.config.connections
        line_length = connections.marriage_line_length
        y = generation.layout.y_position
        current_x = 0.0

        for couple in generation.couples:
            member1 = individuals_by_id[couple.individual1_id]
            member2 = individuals_by_id[couple.individual2_id]

            member1.layout.position = Position(current_x, y)
            member2.layout.position = Position(current_x + line_length, y)

            couple.layout.center_position = Position(current_x + line_length / 2, y)
            couple.layout.connection_line = ConnectionLine(
                start=Position(member1.layout.position.x + symbols.size / 2, y),
                end=Position(member2.layout.position.x - symbols.size / 2, y),
            )

            child_count = len(couple.children_ids)
            if child_count > 0:
                couple.layout.children_connection = ChildrenConnection(
                    drop_point=Position(
                        couple.layout.center_position.x, y + connections.child_connection_offset
                    ),
                    bridge_width=(child_count - 1) * symbols.spacing if child_count > 1 else 0.0,
                )

            current_x += line_length + symbols.spacing + self.config.generations.horizontal_spacing

        coupled_ids = {member_id for couple in generation.couples for member_id in couple.member_ids}
        for individual in generation.individuals:
            if individual.id in coupled_ids:
                continue
            individual.layout.position = Position(current_x, y)
            current_x += symbols.size + symbols.spacing

    # ------------------------------------------------------------------
    # Phase 3: centering
    # ------------------------------------------------------------------

    def _center_tree(self, generations: list[Generation], bounds: Bounds):
        padding = self.config.canvas.padding
        canvas_width = bounds.width + padding * 2
        canvas_height = bounds.height + padding * 2
        offset_x = (canvas_width - bounds.width) / 2 - bounds.min_x
        offset_y = (canvas_height - bounds.height) / 2 - bounds.min_y

        for generation in generations:
            generation.layout.y_position += offset_y
            for individual in generation.individuals:
                individual.layout.position.translate(offset_x, offset_y)
            for couple in generation.couples:
                couple.layout.center_position.translate(offset_x, offset_y)
                couple.layout.connection_line.start.translate(offset_x, offset_y)
                couple.layout.connection_line.end.translate(offset_x, offset_y)
                if couple.layout.children_connection is not None:
                    couple.layout.children_connection.drop_point.translate(offset_x, offset_y)

    # ------------------------------------------------------------------
    # Phase 4: connections
    # ------------------------------------------------------------------

    def _calculate_family_connections(
        self, generations: list[Generation], individuals_by_id: dict[str, Individual]
    ) -> list[FamilyConnection]:
        connections: list[FamilyConnection] = []

        for generation in generations:
            for couple in generation.couples:
                line = couple.layout.connection_line
                connections.append(
                    FamilyConnection(
                        id=f"marriage-{couple.id}",
                        type=MARRIAGE,
                        from_id=couple.individual1_id,
                        to_id=couple.individual2_id,
                        path=ConnectionPath(
                            points=[_copy(line.start), _copy(line.end)],
                            style=self._style(dashed=couple.divorced),
                        ),
                    )
                )

        for generation in generations:
            for couple in generation.couples:
                if couple.children_ids:
                    connections.extend(self._create_parent_child_connections(couple, individuals_by_id))

        return connections

    def _create_parent_child_connections(
        self, couple: Couple, individuals_by_id: dict[str, Individual]
    ) -> list[FamilyConnection]:
        children = [individuals_by_id[c] for c in couple.children_ids if c in individuals_by_id]
        children_connection = couple.layout.children_connection
        if not children or children_connection is None:
            return []

        drop_point = children_connection.drop_point
        half = self.config.symbols.size / 2

        if len(children) == 1:
            child = children[0]
            return [
                FamilyConnection(
                    id=f"parent-child-{couple.id}-{child.id}",
                    type=PARENT_CHILD,
                    from_id=couple.id,
                    to_id=child.id,
                    path=ConnectionPath(
                        points=[_copy(drop_point), self._inner_edge(child)], style=self._style()
                    ),
                )
            ]

        children = sorted(children, key=lambda c: c.layout.position.x)
        child_ids = [child.id for child in children]
        bridge_y = drop_point.y + self.config.connections.child_connection_offset
        first, last = children[0], children[-1]

        connections = [
            FamilyConnection(
                id=f"parent-bridge-{couple.id}",
                type=PARENT_CHILD,
                from_id=couple.id,
                to_id=list(child_ids),
                path=ConnectionPath(
                    points=[_copy(drop_point), Position(drop_point.x, bridge_y)],
                    style=self._style(),
                ),
            ),
            FamilyConnection(
                id=f"sibling-bridge-{couple.id}",
                type=SIBLING_BRIDGE,
                from_id=couple.id,
                to_id=list(child_ids),
                path=ConnectionPath(
                    points=[
                        Position(first.layout.position.x + half, bridge_y),
                        Position(last.layout.position.x + half, bridge_y),
                    ],
                    style=self._style(),
                ),
            ),
        ]
        for child in children:
            connections.append(
                FamilyConnection(
                    id=f"bridge-child-{couple.id}-{child.id}",
                    type=PARENT_CHILD,
                    from_id=couple.id,
                    to_id=child.id,
                    path=ConnectionPath(
                        points=[
                            Position(child.layout.position.x + half, bridge_y),
                            self._inner_edge(child),
                        ],
                        style=self._style(),
                    ),
                )
            )
        return connections

    def _inner_edge(self, individual: Individual) -> Position:
        pos = individual.layout.position
        return Position(pos.x + self.config.symbols.size / 2, pos.y)

    def _style(self, dashed: bool = False) -> ConnectionStyle:
        return ConnectionStyle(
            stroke="#000000",
            stroke_width=self.config.connections.stroke_width,
            stroke_dasharray="5,5" if dashed else None,
        )


def _copy(point: Position) -> Position:
    return Position(point.x, point.y)
