"""
Pydantic schemas for blood inventory units.

Each unit records the donor it came from (a loose reference, never
checked), the collection date and an expiry date computed on the
server.  ``status`` is only changed by clients; nothing expires units
automatically.
"""

from datetime import datetime, timedelta
from typing import Literal, Optional

from pydantic import Field

from .common import CamelModel, DocumentRead, Timestamp, utcnow

# Shelf life of refrigerated whole blood.
BLOOD_UNIT_SHELF_LIFE = timedelta(days=35)

UnitStatus = Literal["Available", "Used", "Expired"]


class InventoryCreate(CamelModel):
    """Schema for recording a collected blood unit."""

    blood_type: str = Field(..., description="Blood group of the unit")
    donor_id: str = Field(..., description="Identifier of the donor the unit came from")
    collection_date: Timestamp = Field(..., description="When the unit was collected")


class InventoryRead(DocumentRead):
    """Schema for a stored blood unit."""

    blood_type: str
    donor_id: str
    collection_date: datetime
    expiry_date: datetime
    status: UnitStatus = "Available"
    created_at: datetime


class InventoryUnit(CamelModel):
    """Document written to the inventory collection."""

    blood_type: str
    donor_id: str
    collection_date: Timestamp
    expiry_date: Timestamp
    status: UnitStatus = "Available"
    created_at: Timestamp = Field(default_factory=utcnow)


class InventoryEnvelope(CamelModel):
    """Response for unit creation.

    ``donorUpdated`` tells whether the donor's ``lastDonation`` was
    refreshed; when it was not, ``donorUpdateMessage`` says why.  The
    unit itself is stored in either case.
    """

    success: bool = True
    blood_unit: InventoryRead
    donor_updated: bool
    donor_update_message: Optional[str] = None
