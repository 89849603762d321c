"""
clinic_api/api/routers/visits.py — Visit listing with optional filters.

``doctorid`` and ``patientid`` are parsed leniently and never rejected: a
value with no leading digits simply matches no visit.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query

from clinic_api.api.deps import StoreDep
from clinic_api.api.schemas import VisitOut
from clinic_api.validation import parse_int

router = APIRouter()


@router.get("", response_model=list[VisitOut])
def list_visits(
    store: StoreDep,
    doctorid: str | None = Query(None, description="Only visits with this doctor id"),
    patientid: str | None = Query(None, description="Only visits with this patient id"),
) -> list[dict[str, Any]]:
    """Visits in seed order; both filters apply together when given."""
    return store.filter_visits(
        doctorid=parse_int(doctorid) if doctorid else None,
        patientid=parse_int(patientid) if patientid else None,
        by_doctor=bool(doctorid),
        by_patient=bool(patientid),
    )
