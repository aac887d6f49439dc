import abc
from datetime import date
from typing import Iterable, Optional, Tuple
import logging

from patient_lookup.domain.model import Patient
from patient_lookup.domain.validators import PatientValidator

logger = logging.getLogger(__name__)


SEED_PATIENTS: Tuple[Patient, ...] = (
    Patient(
        id=1,
        nhs_number="1234567890",
        name="John Smith",
        date_of_birth=date(1980, 5, 15),
        gp_practice="Central Medical Practice",
    ),
    Patient(
        id=2,
        nhs_number="0987654321",
        name="Jane Doe",
        date_of_birth=date(1975, 8, 22),
        gp_practice="Westside Health Centre",
    ),
    Patient(
        id=3,
        nhs_number="5678901234",
        name="Michael Johnson",
        date_of_birth=date(1990, 12, 3),
        gp_practice="North Street Surgery",
    ),
    Patient(
        id=4,
        nhs_number="1122334455",
        name="Sarah Williams",
        date_of_birth=date(1985, 3, 27),
        gp_practice="Springfield Medical Clinic",
    ),
    Patient(
        id=5,
        nhs_number="5544332211",
        name="David Brown",
        date_of_birth=date(1972, 11, 10),
        gp_practice="Riverside Health Practice",
    ),
)


class AbstractRepository(abc.ABC):

    def get(self, patient_id: int) -> Optional[Patient]:
        """Return the patient with this id, or None. Never raises for unknown ids."""
        logger.debug(f"Querying patient repository for id: {patient_id}")
        patient = self._get(patient_id)
        if patient is not None:
            logger.debug(f"Patient record found in repository. id: {patient_id}")
        else:
            logger.debug(f"No patient record found in repository. id: {patient_id}")
        return patient

    @abc.abstractmethod
    def _get(self, patient_id: int) -> Optional[Patient]:
        raise NotImplementedError


class InMemoryRepository(AbstractRepository):
    """
    Read-only repository over a fixed collection of patients.

    The collection is copied into a tuple at construction and never changes
    afterwards, so concurrent reads need no locking. Every record is checked
    against the domain rules up front; invalid or duplicate records raise
    ValueError.
    """

    def __init__(self, patients: Iterable[Patient] = SEED_PATIENTS):
        self._patients = tuple(patients)
        self._check_records()
        logger.info(f"Patient repository initialised with {len(self._patients)} records")

    def _check_records(self):
        validator = PatientValidator()
        seen_ids = set()
        for patient in self._patients:
            if patient.id in seen_ids:
                raise ValueError(f"Duplicate patient id in repository: {patient.id}")
            seen_ids.add(patient.id)

            violations = validator.validate(patient)
            if violations:
                messages = "; ".join(v.message for v in violations)
                raise ValueError(f"Invalid patient record {patient.id}: {messages}")

    def _get(self, patient_id: int) -> Optional[Patient]:
        # linear scan; ids are unique so the first match is the only one
        return next((p for p in self._patients if p.id == patient_id), None)
