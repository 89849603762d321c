"""
clinic_api/store/seed.py — Seed dataset loader.

Reads the static JSON document that supplies the initial doctors, patients
and visits. The file is only ever read; nothing is written back.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

COLLECTIONS = ("doctors", "patients", "visits")

# Entity fields every seeded record must carry.
REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "doctors": ("id", "name"),
    "patients": ("id", "name"),
    "visits": ("doctorid", "patientid"),
}


class SeedDataError(Exception):
    """Raised when the seed document is missing or fails shape checks."""


def validate_seed(data: Any) -> dict[str, list[dict[str, Any]]]:
    """Check the seed document shape and return its three collections."""
    if not isinstance(data, dict):
        raise SeedDataError("Seed document must be a JSON object.")

    seed: dict[str, list[dict[str, Any]]] = {}
    for name in COLLECTIONS:
        records = data.get(name, [])
        if not isinstance(records, list):
            raise SeedDataError(f"Seed collection '{name}' must be a list.")

        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise SeedDataError(f"{name}[{index}] must be an object.")
            missing = [f for f in REQUIRED_FIELDS[name] if f not in record]
            if missing:
                raise SeedDataError(f"{name}[{index}] is missing {', '.join(missing)}.")
            for field in REQUIRED_FIELDS[name]:
                if field != "name" and not isinstance(record[field], int):
                    raise SeedDataError(f"{name}[{index}].{field} must be an integer.")
        seed[name] = records
    return seed


def load_seed(path: Path) -> dict[str, list[dict[str, Any]]]:
    """
    Load and validate the seed document at ``path``.

    Returns:
        Mapping of collection name to its list of records.
    """
    if not path.exists():
        raise SeedDataError(f"Seed dataset not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SeedDataError(f"Seed dataset is not valid JSON: {path}: {exc}") from exc

    seed = validate_seed(data)
    logger.info(
        "seed_loaded",
        path=str(path),
        **{name: len(records) for name, records in seed.items()},
    )
    return seed
