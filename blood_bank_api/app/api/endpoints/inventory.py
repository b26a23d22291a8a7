"""
Blood inventory endpoints.

Recording a unit computes its expiry date (collection date plus 35
days) and refreshes the donor's last donation date.  The response
reports both outcomes separately: ``success`` refers to the unit,
``donorUpdated`` to the donor.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.errors import PyMongoError

from blood_bank_api.app.core.db import Database, get_database
from blood_bank_api.app.schemas.common import MessageEnvelope
from blood_bank_api.app.schemas.inventory import InventoryCreate, InventoryEnvelope, InventoryRead
from blood_bank_api.app.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[InventoryRead])
async def list_inventory(db: Database = Depends(get_database)) -> List[InventoryRead]:
    """Return all blood units, most recently recorded first."""
    try:
        return await InventoryService.list_units(db)
    except Exception as e:
        logger.exception("Failed to list inventory")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("", response_model=InventoryEnvelope)
async def add_blood_unit(
    unit_in: InventoryCreate,
    db: Database = Depends(get_database),
) -> InventoryEnvelope:
    try:
        result = await InventoryService.create_unit(db, unit_in)
    except (PyMongoError, RuntimeError) as e:
        logger.exception("Database error while creating a record")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return InventoryEnvelope(
        blood_unit=result.unit,
        donor_updated=result.donor_updated,
        donor_update_message=result.donor_message,
    )


@router.delete("/{unit_id}", response_model=MessageEnvelope)
async def delete_blood_unit(unit_id: str, db: Database = Depends(get_database)) -> MessageEnvelope:
    try:
        await InventoryService.delete_unit(db, unit_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Failed to delete blood unit %s", unit_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return MessageEnvelope(success=True, message="Blood unit deleted successfully")
