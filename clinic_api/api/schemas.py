"""clinic_api/api/schemas.py — Request and response bodies."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NameIn(BaseModel):
    """Creation body for doctors and patients. Only presence of ``name`` is checked."""

    name: Any = Field(None, examples=["Dr. Jane Doe"])


def name_from_body(body: Any) -> Any:
    """
    The ``name`` of a creation body, or None.

    Bodies that are not JSON objects (arrays, scalars, form-encoded bytes)
    carry no name, the same as an empty object.
    """
    if not isinstance(body, dict):
        return None
    return NameIn.model_validate(body).name


class DoctorOut(BaseModel):
    id: int
    name: Any


class PatientOut(BaseModel):
    id: int
    name: Any


class VisitOut(BaseModel):
    # Seed visits may carry any extra attributes; they pass through untouched.
    model_config = ConfigDict(extra="allow")

    doctorid: int
    patientid: int


class ErrorOut(BaseModel):
    error: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorOut, "description": "Invalid id or missing field"},
    404: {"model": ErrorOut, "description": "Record not found"},
}
