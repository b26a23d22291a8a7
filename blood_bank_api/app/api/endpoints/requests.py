"""
Blood request endpoints.

Hospitals submit requests which staff later mark as fulfilled or
cancelled through ``PUT``.  An update of an unknown id answers with
``success: true`` and ``request: null``.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.errors import PyMongoError

from blood_bank_api.app.core.db import Database, get_database
from blood_bank_api.app.schemas.common import MessageEnvelope
from blood_bank_api.app.schemas.request import (
    RequestCreate,
    RequestEnvelope,
    RequestRead,
    RequestUpdate,
)
from blood_bank_api.app.services.request_service import RequestService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[RequestRead])
async def list_requests(db: Database = Depends(get_database)) -> List[RequestRead]:
    """Return all requests ordered by request date, newest first."""
    try:
        return await RequestService.list_requests(db)
    except Exception as e:
        logger.exception("Failed to list requests")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("", response_model=RequestEnvelope)
async def create_request(request_in: RequestCreate, db: Database = Depends(get_database)) -> RequestEnvelope:
    try:
        request = await RequestService.create_request(db, request_in)
    except (PyMongoError, RuntimeError) as e:
        logger.exception("Database error while creating a record")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return RequestEnvelope(request=request)


@router.put("/{request_id}", response_model=RequestEnvelope)
async def update_request(
    request_id: str,
    request_in: RequestUpdate,
    db: Database = Depends(get_database),
) -> RequestEnvelope:
    """Apply the provided fields to a request and return the result."""
    try:
        request = await RequestService.update_request(db, request_id, request_in)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Failed to update request %s", request_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return RequestEnvelope(request=request)


@router.delete("/{request_id}", response_model=MessageEnvelope)
async def delete_request(request_id: str, db: Database = Depends(get_database)) -> MessageEnvelope:
    try:
        await RequestService.delete_request(db, request_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Failed to delete request %s", request_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return MessageEnvelope(success=True, message="Request deleted successfully")
