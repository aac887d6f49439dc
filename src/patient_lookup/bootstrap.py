"""Explicit wiring of repository, handlers and validators into a message bus."""

from functools import partial
from typing import Optional

from patient_lookup.adapters.repository import AbstractRepository, InMemoryRepository
from patient_lookup.domain.queries import GetPatient
from patient_lookup.service_layer import handlers
from patient_lookup.service_layer.messagebus import (
    MessageBus,
    logging_middleware,
    validation_middleware,
)
from patient_lookup.service_layer.validators import GetPatientValidator


def bootstrap(repo: Optional[AbstractRepository] = None) -> MessageBus:
    if repo is None:
        repo = InMemoryRepository()

    query_handlers = {
        GetPatient: partial(handlers.get_patient, repo=repo),
    }
    validators = {
        GetPatient: [GetPatientValidator()],
    }

    return MessageBus(
        handlers=query_handlers,
        middleware=[logging_middleware, validation_middleware(validators)],
    )
