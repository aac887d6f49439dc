import logging

from patient_lookup.adapters.repository import AbstractRepository
from patient_lookup.domain.model import PatientDetails
from patient_lookup.domain.queries import GetPatient
from shared.domain.results import Result

logger = logging.getLogger(__name__)


def get_patient(
    query: GetPatient,
    repo: AbstractRepository,
) -> Result[PatientDetails]:
    """
    Look up a patient and project it for display.

    A missing patient is an expected outcome, returned as a failed Result
    rather than raised.

    Args:
        query: GetPatient query with an already validated patient_id
        repo: repository to read from

    Returns:
        Result carrying PatientDetails, or the not-found message
    """
    logger.info(f"Processing GetPatient query for patient_id: {query.patient_id}")

    patient = repo.get(query.patient_id)

    if patient is None:
        logger.warning(f"Patient not found. patient_id: {query.patient_id}")
        return Result.failure(f"Patient with ID {query.patient_id} not found.")

    logger.info(f"Patient found. patient_id: {query.patient_id}")
    return Result.success(PatientDetails.from_patient(patient))
