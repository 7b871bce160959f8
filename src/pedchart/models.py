"""Data classes for pedigree entities and the computed layout."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date

MALE = "male"
FEMALE = "female"
UNKNOWN = "unknown"

HEALTHY = "healthy"
AFFECTED = "affected"

ALIVE = "alive"
DECEASED = "deceased"

MARRIAGE = "marriage"
PARENT_CHILD = "parent_child"
SIBLING_BRIDGE = "sibling_bridge"


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0

    def translate(self, dx: float, dy: float):
        self.x += dx
        self.y += dy


@dataclass(frozen=True)
class GeneticSymbol:
    shape: str = "circle"  # square, circle
    fill: str = "empty"  # empty, filled
    status: str = UNKNOWN  # alive, deceased, unknown


@dataclass
class MedicalStatus:
    health_status: str = UNKNOWN  # healthy, affected, unknown
    life_status: str = UNKNOWN  # alive, deceased, unknown
    is_proband: bool = False


@dataclass
class Relationships:
    spouse_id: str | None = None
    parent_ids: list[str] = field(default_factory=list)
    children_ids: list[str] = field(default_factory=list)
    sibling_ids: list[str] = field(default_factory=list)


@dataclass
class IndividualLayout:
    generation: int = 0
    position: Position = field(default_factory=Position)
    symbol: GeneticSymbol = field(default_factory=GeneticSymbol)
    size: float = 40.0


@dataclass
class Individual:
    id: str
    first_name: str
    gender: str = UNKNOWN  # male, female, unknown
    last_name: str | None = None
    birth_date: date | None = None
    age: int | None = None
    medical_status: MedicalStatus = field(default_factory=MedicalStatus)
    relationships: Relationships = field(default_factory=Relationships)
    layout: IndividualLayout = field(default_factory=IndividualLayout)

    @property
    def name(self) -> str:
        parts = [p for p in [self.first_name, self.last_name] if p]
        return " ".join(parts) if parts else self.id


@dataclass
class ChildrenConnection:
    drop_point: Position
    bridge_width: float = 0.0


@dataclass
class ConnectionLine:
    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)


@dataclass
class CoupleLayout:
    generation: int = 0
    center_position: Position = field(default_factory=Position)
    connection_line: ConnectionLine = field(default_factory=ConnectionLine)
    children_connection: ChildrenConnection | None = None


@dataclass
class Couple:
    id: str
    individual1_id: str
    individual2_id: str
    children_ids: list[str] = field(default_factory=list)
    marriage_date: date | None = None
    divorced: bool = False
    layout: CoupleLayout = field(default_factory=CoupleLayout)

    @property
    def member_ids(self) -> tuple[str, str]:
        return (self.individual1_id, self.individual2_id)


@dataclass
class GenerationSpacing:
    between_individuals: float
    between_couples: float


@dataclass
class GenerationLayout:
    spacing: GenerationSpacing
    y_position: float = 0.0
    total_width: float = 0.0


@dataclass
class Generation:
    level: int  # 0 = oldest observed layer
    individuals: list[Individual]
    couples: list[Couple]
    layout: GenerationLayout


@dataclass
class ConnectionStyle:
    stroke: str = "#000000"
    stroke_width: float = 2.0
    stroke_dasharray: str | None = None


@dataclass
class ConnectionPath:
    points: list[Position]
    style: ConnectionStyle = field(default_factory=ConnectionStyle)


@dataclass
class FamilyConnection:
    id: str
    type: str  # marriage, parent_child, sibling_bridge
    from_id: str
    to_id: str | list[str]  # list for connections shared by a sibship
    path: ConnectionPath


@dataclass(frozen=True)
class Bounds:
    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class CanvasSize:
    width: float
    height: float


@dataclass
class TreeLayout:
    generations: list[Generation]
    connections: list[FamilyConnection]
    canvas_size: CanvasSize
    bounds: Bounds

    def individuals(self) -> Iterator[Individual]:
        for generation in self.generations:
            yield from generation.individuals

    def find_individual(self, individual_id: str) -> Individual | None:
        for individual in self.individuals():
            if individual.id == individual_id:
                return individual
        return None

    def connections_of_type(self, connection_type: str) -> list[FamilyConnection]:
        return [c for c in self.connections if c.type == connection_type]


@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
