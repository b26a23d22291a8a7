"""
Pydantic schemas for blood donors.

A donor registers with contact details and a blood type.
``lastDonation`` stays empty until the first blood unit collected from
the donor is recorded in the inventory.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel, DocumentRead, Timestamp, utcnow


class DonorCreate(CamelModel):
    """Schema for registering a donor."""

    name: str = Field(..., description="Full name of the donor")
    blood_type: str = Field(..., description="Blood group, e.g. ``O+``")
    phone: str = Field(..., description="Contact phone number")
    email: str = Field(..., description="Contact email address")
    address: str = Field(..., description="Postal address")
    last_donation: Optional[Timestamp] = Field(None, description="Date of the most recent donation")
    created_at: Timestamp = Field(default_factory=utcnow)


class DonorRead(DocumentRead):
    """Schema for a stored donor."""

    name: str
    blood_type: str
    phone: str
    email: str
    address: str
    last_donation: Optional[datetime] = None
    created_at: datetime


class DonorEnvelope(CamelModel):
    success: bool = True
    donor: DonorRead
