"""Clinic Records API — in-memory doctors, patients and visits over HTTP."""

__version__ = "1.0.0"
