"""
Doctor endpoints for API v1.

These routes expose a CRUD API over the ``doctors`` table.  The ``id``
path parameter is taken as an opaque string and handed to the service
unchanged.  A lookup for an id with no matching row is not an error:
the response carries ``doctor: null``.

Database failures are not caught here; they surface through the
application's ``StoreError`` handler as HTTP 500.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, Response, status

from doctors_api.app.core.db import Database
from doctors_api.app.core.responses import success_envelope
from doctors_api.app.schemas.doctor import DoctorIn
from doctors_api.app.services.doctor_service import DoctorService

router = APIRouter()


def get_db(request: Request) -> Database:
    """Return the database opened by the application lifespan."""
    return request.app.state.db


@router.get("", response_model=Dict[str, Any])
async def list_doctors(db: Database = Depends(get_db)) -> Dict[str, Any]:
    """Return all doctors together with their count."""
    doctors = await DoctorService.list_doctors(db)
    return success_envelope({"doctors": doctors}, results=len(doctors))


@router.get("/{doctor_id}", response_model=Dict[str, Any])
async def get_doctor(doctor_id: str, db: Database = Depends(get_db)) -> Dict[str, Any]:
    doctor = await DoctorService.get_doctor(db, doctor_id)
    return success_envelope({"doctor": doctor})


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_doctor(
    doctor_in: Optional[DoctorIn] = None,
    db: Database = Depends(get_db),
) -> Dict[str, Any]:
    """Create a doctor; the store assigns its ``id``.

    A request without a body inserts a row of ``NULL`` fields.
    """
    doctor = await DoctorService.create_doctor(db, doctor_in or DoctorIn())
    return success_envelope({"doctor": doctor})


@router.put("/{doctor_id}", response_model=Dict[str, Any])
async def update_doctor(
    doctor_id: str,
    doctor_in: Optional[DoctorIn] = None,
    db: Database = Depends(get_db),
) -> Dict[str, Any]:
    """Replace name, city and specialty of a doctor.

    Returns the updated row, or ``doctor: null`` if the id matched
    nothing.
    """
    doctor = await DoctorService.update_doctor(db, doctor_id, doctor_in or DoctorIn())
    return success_envelope({"doctor": doctor})


@router.delete("/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_doctor(doctor_id: str, db: Database = Depends(get_db)) -> Response:
    # 204 responses never carry a body.
    await DoctorService.delete_doctor(db, doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
