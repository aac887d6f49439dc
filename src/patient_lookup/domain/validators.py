"""
Domain-level business rules for the Patient entity.

The read endpoint never runs these rules on a request. They are applied to
the seed records when a repository is built and are kept for a future write
path (creating or updating patients).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import List, Optional

from patient_lookup.domain.model import Patient

_NHS_DIGITS_RE = re.compile(r"\d+", re.ASCII)

NHS_NUMBER_LENGTH = 10
MAX_NAME_LENGTH = 200


@dataclass(frozen=True)
class Violation:
    """A single broken rule, attributed to the offending field."""
    field: str
    message: str


class PatientValidator:

    def validate(self, patient: Patient, today: Optional[date] = None) -> List[Violation]:
        """
        Check a Patient against the business rules.

        Args:
            patient: entity to check
            today: reference date for the date-of-birth rule, defaults to the
                current UTC date

        Returns:
            List of violations, empty when the patient is valid
        """
        if today is None:
            today = datetime.now(timezone.utc).date()

        violations = []

        if patient.id <= 0:
            violations.append(Violation("id", "Patient ID must be greater than 0"))

        violations.extend(self._check_nhs_number(patient.nhs_number))

        if not patient.name or not patient.name.strip():
            violations.append(Violation("name", "Patient name is required"))
        elif len(patient.name) > MAX_NAME_LENGTH:
            violations.append(Violation("name", f"Patient name cannot exceed {MAX_NAME_LENGTH} characters"))

        if patient.date_of_birth > today:
            violations.append(Violation("date_of_birth", "Date of birth must be in the past"))

        if not patient.gp_practice or not patient.gp_practice.strip():
            violations.append(Violation("gp_practice", "GP Practice is required"))
        elif len(patient.gp_practice) > MAX_NAME_LENGTH:
            violations.append(
                Violation("gp_practice", f"GP Practice name cannot exceed {MAX_NAME_LENGTH} characters")
            )

        return violations

    def _check_nhs_number(self, nhs_number: str) -> List[Violation]:
        violations = []
        if not nhs_number:
            violations.append(Violation("nhs_number", "NHS Number is required"))
        if len(nhs_number) != NHS_NUMBER_LENGTH:
            violations.append(
                Violation("nhs_number", f"NHS Number must be exactly {NHS_NUMBER_LENGTH} digits long")
            )
        if not _NHS_DIGITS_RE.fullmatch(nhs_number):
            violations.append(Violation("nhs_number", "NHS Number must contain only digits"))
        return violations
