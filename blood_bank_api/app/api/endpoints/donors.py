"""
Donor endpoints.

Donors can be listed, registered and deleted.  Deleting an id that does
not exist is not an error; the response is the same as for a real
deletion.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.errors import PyMongoError

from blood_bank_api.app.core.db import Database, get_database
from blood_bank_api.app.schemas.common import MessageEnvelope
from blood_bank_api.app.schemas.donor import DonorCreate, DonorEnvelope, DonorRead
from blood_bank_api.app.services.donor_service import DonorService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[DonorRead])
async def list_donors(db: Database = Depends(get_database)) -> List[DonorRead]:
    """Return all donors, newest registration first."""
    try:
        return await DonorService.list_donors(db)
    except Exception as e:
        logger.exception("Failed to list donors")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("", response_model=DonorEnvelope)
async def create_donor(donor_in: DonorCreate, db: Database = Depends(get_database)) -> DonorEnvelope:
    """Register a donor and return the stored record."""
    try:
        donor = await DonorService.create_donor(db, donor_in)
    except (PyMongoError, RuntimeError) as e:
        logger.exception("Database error while creating a record")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return DonorEnvelope(donor=donor)


@router.delete("/{donor_id}", response_model=MessageEnvelope)
async def delete_donor(donor_id: str, db: Database = Depends(get_database)) -> MessageEnvelope:
    """Delete a donor by id."""
    try:
        await DonorService.delete_donor(db, donor_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Failed to delete donor %s", donor_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return MessageEnvelope(success=True, message="Donor deleted successfully")
