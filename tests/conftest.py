# pylint: disable=redefined-outer-name
from datetime import date

import pytest
from fastapi.testclient import TestClient

from patient_lookup.adapters.repository import AbstractRepository, InMemoryRepository
from patient_lookup.bootstrap import bootstrap
from patient_lookup.domain.model import Patient
from patient_lookup.entrypoints.patient_api import app, get_bus


class FakeRepository(AbstractRepository):
    """Repository over a dict that records every lookup it receives."""

    def __init__(self, patients=()):
        self._patients = {p.id: p for p in patients}
        self.requested_ids = []

    def _get(self, patient_id):
        self.requested_ids.append(patient_id)
        return self._patients.get(patient_id)


@pytest.fixture
def john_smith():
    return Patient(
        id=1,
        nhs_number="1234567890",
        name="John Smith",
        date_of_birth=date(1980, 5, 15),
        gp_practice="Central Medical Practice",
    )


@pytest.fixture
def fake_repo(john_smith):
    return FakeRepository([john_smith])


@pytest.fixture
def seeded_repo():
    return InMemoryRepository()


@pytest.fixture
def bus(seeded_repo):
    return bootstrap(repo=seeded_repo)


@pytest.fixture
def client(bus):
    """TestClient with the message bus swapped for a fresh seeded one."""
    app.dependency_overrides[get_bus] = lambda: bus
    yield TestClient(app)
    app.dependency_overrides.clear()
