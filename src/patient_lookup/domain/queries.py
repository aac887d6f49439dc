"""Queries for patient lookup service."""

from dataclasses import dataclass

from shared.domain.messages import Query


@dataclass
class GetPatient(Query):
    """ Query to get patient details by patient_id."""
    patient_id: int
