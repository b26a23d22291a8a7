"""
Pydantic schemas for hospital blood requests.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .common import CamelModel, DocumentRead, Timestamp, utcnow

Priority = Literal["Low", "Medium", "High", "Critical"]
RequestStatus = Literal["Pending", "Fulfilled", "Cancelled"]


class RequestCreate(CamelModel):
    """Schema for submitting a blood request."""

    patient_name: str = Field(..., description="Name of the patient needing blood")
    blood_type: str = Field(..., description="Requested blood group")
    units_needed: int = Field(..., description="Number of units requested")
    priority: Priority
    hospital: str = Field(..., description="Requesting hospital")
    status: RequestStatus = "Pending"
    request_date: Timestamp = Field(default_factory=utcnow)


class RequestUpdate(CamelModel):
    """Schema for updating a request.

    All fields are optional; only provided values are written.
    """

    patient_name: Optional[str] = None
    blood_type: Optional[str] = None
    units_needed: Optional[int] = None
    priority: Optional[Priority] = None
    hospital: Optional[str] = None
    status: Optional[RequestStatus] = None
    request_date: Optional[Timestamp] = None


class RequestRead(DocumentRead):
    """Schema for a stored blood request."""

    patient_name: str
    blood_type: str
    units_needed: int
    priority: Priority
    hospital: str
    status: RequestStatus = "Pending"
    request_date: datetime


class RequestEnvelope(CamelModel):
    """Response for create and update.

    After an update ``request`` is ``null`` when no record matched.
    """

    success: bool = True
    request: Optional[RequestRead] = None
