"""
clinic_api/api/routers/doctors.py — Doctor endpoints.

Path ids are checked for shape (400) before lookup (404); creation only
requires a truthy ``name``.
"""
from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from clinic_api.api.deps import StoreDep
from clinic_api.api.errors import InvalidIdError, MissingNameError, NotFoundError
from clinic_api.api.schemas import ERROR_RESPONSES, DoctorOut, name_from_body
from clinic_api.validation import is_invalid_id, parse_id

router = APIRouter()

CreationBody = Annotated[Any, Body(examples=[{"name": "Dr. Jane Doe"}])]


@router.get("", response_model=list[DoctorOut])
def list_doctors(store: StoreDep) -> list[dict[str, Any]]:
    """All doctors in insertion order."""
    return store.doctors.all()


@router.get("/{doctor_id}", response_model=DoctorOut, responses=ERROR_RESPONSES)
def get_doctor(doctor_id: str, store: StoreDep) -> dict[str, Any]:
    if is_invalid_id(doctor_id):
        raise InvalidIdError()

    doctor = store.doctors.get(parse_id(doctor_id))
    if doctor is None:
        raise NotFoundError("Doctor")
    return doctor


@router.post(
    "",
    response_model=DoctorOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: ERROR_RESPONSES[400]},
)
def create_doctor(store: StoreDep, payload: CreationBody = None) -> dict[str, Any]:
    """Add a doctor; the id is the next value of the doctor id counter."""
    name = name_from_body(payload)
    if not name:
        raise MissingNameError("Doctor")
    return store.doctors.create(name=name)
