import matplotlib

matplotlib.use("Agg")

import pytest

from pedchart.layout import GenealogyEngine
from pedchart.models import (
    HEALTHY,
    ALIVE,
    MALE,
    Couple,
    Individual,
    MedicalStatus,
    Relationships,
)
from pedchart.sample_data import basic_family


def person(id, parents=(), gender=MALE, health=HEALTHY, life=ALIVE, **kwargs):
    return Individual(
        id=id,
        first_name=id.capitalize(),
        gender=gender,
        medical_status=MedicalStatus(health_status=health, life_status=life),
        relationships=Relationships(parent_ids=list(parents)),
        **kwargs,
    )


def couple(id, a, b, children=(), **kwargs):
    return Couple(id=id, individual1_id=a, individual2_id=b, children_ids=list(children), **kwargs)


@pytest.fixture
def engine():
    return GenealogyEngine()


@pytest.fixture
def family():
    return basic_family()
