"""
Pydantic schemas for doctor records.

The request body carries the three mutable columns of the ``doctors``
table.  Fields are not validated: any JSON value is passed to the
database as-is, and omitted fields are written as ``NULL``.  Values
the database cannot bind (objects, arrays) are rejected by the store.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class DoctorIn(BaseModel):
    """Schema for creating or replacing a doctor."""

    name: Optional[Any] = Field(None, examples=["Ada Lovelace"])
    city: Optional[Any] = Field(None, examples=["Boston"])
    specialty: Optional[Any] = Field(None, examples=["Cardiology"])
