"""
Service layer for doctor records.

Each method issues exactly one statement against the shared
``Database``.  All queries use parameterized statements; identifiers
taken from the URL are bound as-is and never interpolated into SQL,
leaving type coercion of non-numeric ids to the database.

Errors are not handled here.  ``StoreError`` propagates to the
application's exception handler.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from doctors_api.app.core.db import Database
from doctors_api.app.schemas.doctor import DoctorIn

logger = logging.getLogger(__name__)


class DoctorService:
    """Service class for the ``doctors`` table."""

    @classmethod
    async def list_doctors(cls, db: Database) -> List[Dict[str, Any]]:
        """Return every row of the table, unfiltered and unpaginated."""
        return await db.execute("SELECT * FROM doctors")

    @classmethod
    async def get_doctor(cls, db: Database, doctor_id: str) -> Optional[Dict[str, Any]]:
        rows = await db.execute("SELECT * FROM doctors WHERE id = ?", (doctor_id,))
        return rows[0] if rows else None

    @classmethod
    async def create_doctor(cls, db: Database, data: DoctorIn) -> Optional[Dict[str, Any]]:
        """Insert a new doctor and return the created row."""
        rows = await db.execute(
            "INSERT INTO doctors (name, city, specialty) VALUES (?, ?, ?) RETURNING *",
            (data.name, data.city, data.specialty),
        )
        doctor = rows[0] if rows else None
        logger.info("Created doctor %s", doctor["id"] if doctor else None)
        return doctor

    @classmethod
    async def update_doctor(
        cls, db: Database, doctor_id: str, data: DoctorIn
    ) -> Optional[Dict[str, Any]]:
        """Overwrite all mutable fields of a doctor.

        Fields missing from ``data`` are written as ``NULL``.  Returns the
        updated row or ``None`` when no row has the given id.
        """
        rows = await db.execute(
            "UPDATE doctors SET name = ?, city = ?, specialty = ? WHERE id = ? RETURNING *",
            (data.name, data.city, data.specialty, doctor_id),
        )
        logger.info("Updated doctor %s (%d row(s))", doctor_id, len(rows))
        return rows[0] if rows else None

    @classmethod
    async def delete_doctor(cls, db: Database, doctor_id: str) -> None:
        await db.execute("DELETE FROM doctors WHERE id = ?", (doctor_id,))
        logger.info("Deleted doctor %s", doctor_id)
