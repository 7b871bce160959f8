"""Sample families for demos and tests."""

from pedchart.models import (
    AFFECTED,
    ALIVE,
    DECEASED,
    FEMALE,
    HEALTHY,
    MALE,
    Couple,
    Individual,
    MedicalStatus,
    Relationships,
)

CHILD_IDS = ["child-001", "child-002", "child-003"]


def _child(id: str, first_name: str, age: int, gender: str, health_status: str) -> Individual:
    return Individual(
        id=id,
        first_name=first_name,
        last_name="Martin",
        age=age,
        gender=gender,
        medical_status=MedicalStatus(health_status=health_status, life_status=ALIVE),
        relationships=Relationships(
            parent_ids=["father-001", "mother-001"],
            sibling_ids=[c for c in CHILD_IDS if c != id],
        ),
    )


def basic_family() -> tuple[list[Individual], list[Couple]]:
    """
    Two parents and three children.

    The mother is the affected proband; the second child is affected like her.
    Fresh objects are returned on every call since layout passes write to them.
    """
    father = Individual(
        id="father-001",
        first_name="Jean",
        last_name="Martin",
        age=45,
        gender=MALE,
        medical_status=MedicalStatus(health_status=HEALTHY, life_status=ALIVE),
        relationships=Relationships(spouse_id="mother-001", children_ids=list(CHILD_IDS)),
    )
    mother = Individual(
        id="mother-001",
        first_name="Marie",
        last_name="Martin",
        age=42,
        gender=FEMALE,
        medical_status=MedicalStatus(health_status=AFFECTED, life_status=ALIVE, is_proband=True),
        relationships=Relationships(spouse_id="father-001", children_ids=list(CHILD_IDS)),
    )
    children = [
        _child("child-001", "Paul", 18, MALE, HEALTHY),
        _child("child-002", "Sophie", 15, FEMALE, AFFECTED),
        _child("child-003", "Lucas", 12, MALE, HEALTHY),
    ]
    couple = Couple(
        id="couple-001",
        individual1_id="father-001",
        individual2_id="mother-001",
        children_ids=list(CHILD_IDS),
    )
    return [father, mother, *children], [couple]


def extended_family() -> tuple[list[Individual], list[Couple]]:
    """
    The basic family plus the father's parents.

    The mother has no recorded parents, so she stays in generation 0 while the
    father moves to generation 1: the parents' couple spans two generations and
    is reported by validation.
    """
    individuals, couples = basic_family()
    father = individuals[0]
    father.relationships.parent_ids = ["pgf-001", "pgm-001"]

    grandfather = Individual(
        id="pgf-001",
        first_name="Pierre",
        last_name="Martin",
        age=75,
        gender=MALE,
        medical_status=MedicalStatus(health_status=HEALTHY, life_status=DECEASED),
        relationships=Relationships(spouse_id="pgm-001", children_ids=["father-001"]),
    )
    grandmother = Individual(
        id="pgm-001",
        first_name="Jeanne",
        last_name="Martin",
        age=72,
        gender=FEMALE,
        medical_status=MedicalStatus(health_status=AFFECTED, life_status=ALIVE),
        relationships=Relationships(spouse_id="pgf-001", children_ids=["father-001"]),
    )
    grandparents = Couple(
        id="couple-pgp-001",
        individual1_id="pgf-001",
        individual2_id="pgm-001",
        children_ids=["father-001"],
    )
    return [grandfather, grandmother, *individuals], [grandparents, *couples]


SAMPLES = {
    "basic": basic_family,
    "extended": extended_family,
}
