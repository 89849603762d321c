"""clinic_api/api/routers/patients.py — Patient endpoints."""
from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from clinic_api.api.deps import StoreDep
from clinic_api.api.errors import InvalidIdError, MissingNameError, NotFoundError
from clinic_api.api.schemas import ERROR_RESPONSES, PatientOut, name_from_body
from clinic_api.validation import is_invalid_id, parse_id

router = APIRouter()

CreationBody = Annotated[Any, Body(examples=[{"name": "Jane Doe"}])]


@router.get("", response_model=list[PatientOut])
def list_patients(store: StoreDep) -> list[dict[str, Any]]:
    return store.patients.all()


@router.get("/{patient_id}", response_model=PatientOut, responses=ERROR_RESPONSES)
def get_patient(patient_id: str, store: StoreDep) -> dict[str, Any]:
    if is_invalid_id(patient_id):
        raise InvalidIdError()

    patient = store.patients.get(parse_id(patient_id))
    if patient is None:
        raise NotFoundError("Patient")
    return patient


@router.post(
    "",
    response_model=PatientOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: ERROR_RESPONSES[400]},
)
def create_patient(store: StoreDep, payload: CreationBody = None) -> dict[str, Any]:
    name = name_from_body(payload)
    if not name:
        raise MissingNameError("Patient")
    return store.patients.create(name=name)
