"""Request validators run by the message bus before any handler is called."""

from typing import List

from patient_lookup.domain.queries import GetPatient
from patient_lookup.domain.validators import Violation


class ValidationError(Exception):
    """Raised when a request breaks one or more input rules."""

    def __init__(self, request_name: str, violations: List[Violation]):
        self.request_name = request_name
        self.violations = list(violations)
        messages = "; ".join(v.message for v in self.violations)
        super().__init__(f"Validation failed for {request_name}: {messages}")


class GetPatientValidator:

    def validate(self, query: GetPatient) -> List[Violation]:
        if query.patient_id <= 0:
            return [Violation("patient_id", "Patient ID must be greater than 0")]
        return []
