"""Consistency checks for pedigree data."""

from collections.abc import Iterable, Sequence

from pedchart.graph import assign_generations, build_parent_graph, find_parent_cycle
from pedchart.models import UNKNOWN, Couple, Individual, ValidationResult


def validate_genetic_consistency(
    individuals: Sequence[Individual], couples: Iterable[Couple] | None = None
) -> ValidationResult:
    """
    Validate a pedigree for:
    - More than two parents for one individual
    - Relationship ids that do not resolve to a known individual
    - Cycles in parent-child relationships
    - Couples with unknown members or members in different generations
    - Unspecified sex or health status (warnings only)

    Never raises for bad data: layout is still computed for an invalid pedigree,
    the result is informational.
    """
    errors: list[str] = []
    warnings: list[str] = []
    known_ids = {individual.id for individual in individuals}

    for individual in individuals:
        rel = individual.relationships

        if len(rel.parent_ids) > 2:
            errors.append(f"Individual {individual.name} has more than 2 parents")

        for parent_id in rel.parent_ids:
            if parent_id not in known_ids:
                errors.append(f"Parent {parent_id} not found for {individual.name}")
        for child_id in rel.children_ids:
            if child_id not in known_ids:
                errors.append(f"Child {child_id} not found for {individual.name}")
        for sibling_id in rel.sibling_ids:
            if sibling_id not in known_ids:
                errors.append(f"Sibling {sibling_id} not found for {individual.name}")
        if rel.spouse_id and rel.spouse_id not in known_ids:
            errors.append(f"Spouse {rel.spouse_id} not found for {individual.name}")

        if individual.gender == UNKNOWN:
            warnings.append(f"Gender not specified for {individual.name}")
        if individual.medical_status.health_status == UNKNOWN:
            warnings.append(f"Health status not specified for {individual.name}")

    cycle = find_parent_cycle(build_parent_graph(individuals))
    if cycle is not None:
        errors.append(f"Cycle detected in parent-child relationships: {cycle}")
        generations = None
    else:
        generations = assign_generations(individuals)

    for couple in couples or ():
        missing = [member_id for member_id in couple.member_ids if member_id not in known_ids]
        for member_id in missing:
            errors.append(f"Individual {member_id} not found in couple {couple.id}")
        for child_id in couple.children_ids:
            if child_id not in known_ids:
                errors.append(f"Child {child_id} not found in couple {couple.id}")

        # Generations are only meaningful on an acyclic graph
        if missing or generations is None:
            continue
        generation1 = generations[couple.individual1_id]
        generation2 = generations[couple.individual2_id]
        if generation1 != generation2:
            errors.append(
                f"Couple {couple.id} spans generations {generation1} and {generation2}"
            )

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
