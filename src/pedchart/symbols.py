"""Medical pedigree symbol rules."""

from pedchart.models import AFFECTED, MALE, GeneticSymbol, Individual


def generate_genetic_symbol(individual: Individual) -> GeneticSymbol:
    """
    Map sex and medical status to the symbol drawn for an individual.

    Males are squares, everybody else a circle. Affected individuals are filled.
    The status is the life status as-is; the renderer strikes through deceased
    individuals.
    """
    status = individual.medical_status
    return GeneticSymbol(
        shape="square" if individual.gender == MALE else "circle",
        fill="filled" if status.health_status == AFFECTED else "empty",
        status=status.life_status,
    )
