from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Patient:
    id: int                   # unique within the store
    nhs_number: str           # 10 decimal digits
    name: str
    date_of_birth: date
    gp_practice: str          # registered practice name


@dataclass(frozen=True)
class PatientDetails:
    """Read-only view of the displayable fields of a Patient."""
    nhs_number: str
    name: str
    date_of_birth: date
    gp_practice: str

    @classmethod
    def from_patient(cls, patient: Patient) -> PatientDetails:
        return cls(
            nhs_number=patient.nhs_number,
            name=patient.name,
            date_of_birth=patient.date_of_birth,
            gp_practice=patient.gp_practice,
        )
