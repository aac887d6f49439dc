"""
Patient Lookup API Entrypoint - Thin API with Query Dispatch
API receives requests and dispatches queries through the message bus
"""
import logging
from datetime import date, datetime, timezone
from functools import lru_cache
from typing import List

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

import config
from patient_lookup.bootstrap import bootstrap
from patient_lookup.domain.queries import GetPatient
from patient_lookup.service_layer.messagebus import MessageBus
from patient_lookup.service_layer.validators import ValidationError

logging.basicConfig(
    level=getattr(logging, config.get_log_level()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Patient Lookup API",
    description="Read-only patient demographics lookup",
    version="1.0.0"
)


# ---------- Request/Response models ----------

class PatientDetailsResponse(BaseModel):
    nhs_number: str
    name: str
    date_of_birth: date
    gp_practice: str

class ErrorResponse(BaseModel):
    message: str

class FieldError(BaseModel):
    field: str
    message: str

class ValidationErrorResponse(BaseModel):
    message: str
    errors: List[FieldError]


# ---------- Dependencies ----------

@lru_cache
def get_bus() -> MessageBus:
    return bootstrap()


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    # client input error, not a system fault
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    body = ValidationErrorResponse(
        message="; ".join(v.message for v in exc.violations),
        errors=[FieldError(field=v.field, message=v.message) for v in exc.violations],
    )
    return JSONResponse(status_code=400, content=body.model_dump())


# ---------- Endpoints ----------

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "patient-lookup-api",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get(
    "/api/patients/{patient_id}",
    response_model=PatientDetailsResponse,
    responses={404: {"model": ErrorResponse}, 400: {"model": ValidationErrorResponse}},
    summary="Get patient details by patient_id",
)
def get_patient(patient_id: int, bus: MessageBus = Depends(get_bus)):
    """
    Get patient details by patient_id.
    Returns the four display fields, or 404 with a message if the patient is unknown.
    """
    logger.info(f"HTTP GET request received for patient. patient_id: {patient_id}")

    result = bus.handle(GetPatient(patient_id=patient_id))

    if not result.is_success:
        logger.warning(f"Patient retrieval failed. patient_id: {patient_id}, error: {result.error_message}")
        return JSONResponse(status_code=404, content=ErrorResponse(message=result.error_message).model_dump())

    logger.info(f"Patient retrieved successfully. patient_id: {patient_id}")
    details = result.data
    return PatientDetailsResponse(
        nhs_number=details.nhs_number,
        name=details.name,
        date_of_birth=details.date_of_birth,
        gp_practice=details.gp_practice,
    )


def main():
    api_config = config.get_api_host_and_port()
    uvicorn.run(app, host=api_config["host"], port=api_config["port"], log_level=config.get_log_level().lower())


if __name__ == "__main__":
    main()
