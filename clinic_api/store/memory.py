"""
clinic_api/store/memory.py — In-memory clinic store.

One ``ClinicStore`` holds the doctor, patient and visit collections for the
lifetime of an app instance. Each app receives its own store, so tests can
build isolated instances instead of sharing process state.
"""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import structlog

from clinic_api.store.seed import load_seed

logger = structlog.get_logger(__name__)

Record = dict[str, Any]


class Collection:
    """
    Ordered records with ascending integer ids.

    Ids come from a counter seeded with the highest existing id, never from
    the current length. The counter bump and the append share one lock.
    """

    def __init__(self, name: str, records: list[Record] | None = None) -> None:
        self.name = name
        self._records: list[Record] = list(records or [])
        self._last_id = max((r.get("id", 0) for r in self._records), default=0)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> list[Record]:
        with self._lock:
            return list(self._records)

    def get(self, record_id: int) -> Record | None:
        for record in self.all():
            if record.get("id") == record_id:
                return record
        return None

    def create(self, **fields: Any) -> Record:
        with self._lock:
            self._last_id += 1
            record = {"id": self._last_id, **fields}
            self._records.append(record)
        logger.info("record_created", collection=self.name, id=record["id"])
        return record


class ClinicStore:
    """Doctors, patients and visits shared by every handler of one app."""

    def __init__(
        self,
        doctors: list[Record] | None = None,
        patients: list[Record] | None = None,
        visits: list[Record] | None = None,
    ) -> None:
        self.doctors = Collection("doctors", doctors)
        self.patients = Collection("patients", patients)
        # Visits are never created at runtime.
        self._visits: tuple[Record, ...] = tuple(visits or ())

    @classmethod
    def from_seed(cls, path: Path) -> ClinicStore:
        """Build a store from a freshly read seed document."""
        seed = load_seed(path)
        return cls(
            doctors=seed["doctors"],
            patients=seed["patients"],
            visits=seed["visits"],
        )

    @property
    def visits(self) -> list[Record]:
        return list(self._visits)

    def filter_visits(
        self,
        doctorid: int | None = None,
        patientid: int | None = None,
        *,
        by_doctor: bool = False,
        by_patient: bool = False,
    ) -> list[Record]:
        """
        Visits matching every enabled filter, in seed order.

        A filter that is enabled with a ``None`` value matches nothing.
        """
        visits = self.visits
        if by_doctor:
            visits = [v for v in visits if doctorid is not None and v.get("doctorid") == doctorid]
        if by_patient:
            visits = [v for v in visits if patientid is not None and v.get("patientid") == patientid]
        return visits

    def counts(self) -> dict[str, int]:
        return {
            "doctors": len(self.doctors),
            "patients": len(self.patients),
            "visits": len(self._visits),
        }
