"""
clinic_api/api/deps.py — FastAPI shared dependencies.

The store lives on ``app.state`` so that each app built by ``create_app``
owns exactly one dataset, and handlers receive it by injection.
"""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from clinic_api.store.memory import ClinicStore


def get_store(request: Request) -> ClinicStore:
    """Return the store of the app serving this request."""
    return request.app.state.store


StoreDep = Annotated[ClinicStore, Depends(get_store)]
