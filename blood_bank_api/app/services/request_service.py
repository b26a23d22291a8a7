"""
Service layer for hospital blood requests.

Requests are listed by ``requestDate`` (newest first) and can be
partially updated; typically only ``status`` changes once a request is
fulfilled or cancelled.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pymongo import DESCENDING, ReturnDocument

from blood_bank_api.app.core.db import Database, parse_object_id
from blood_bank_api.app.schemas.request import RequestCreate, RequestRead, RequestUpdate

logger = logging.getLogger(__name__)


class RequestService:
    """Service class for managing blood requests."""

    @classmethod
    async def list_requests(cls, db: Database) -> List[RequestRead]:
        cursor = db.requests.find().sort("requestDate", DESCENDING)
        requests: List[RequestRead] = []
        async for document in cursor:
            requests.append(RequestRead.from_document(document))
        return requests

    @classmethod
    async def create_request(cls, db: Database, data: RequestCreate) -> RequestRead:
        document = data.to_document()
        result = await db.requests.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info("Created blood request %s for %s", result.inserted_id, data.hospital)
        return RequestRead.from_document(document)

    @classmethod
    async def update_request(
        cls, db: Database, request_id: str, data: RequestUpdate
    ) -> Optional[RequestRead]:
        """Update an existing request.

        Only fields provided in ``data`` are written.  Returns the
        updated request, or ``None`` if no request has this id.
        """
        object_id = parse_object_id(request_id)
        changes = data.to_document(exclude_unset=True, exclude_none=True)
        if changes:
            document = await db.requests.find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        else:
            document = await db.requests.find_one({"_id": object_id})
        if document is None:
            return None
        logger.info("Updated blood request %s: %s", request_id, ", ".join(changes) or "no changes")
        return RequestRead.from_document(document)

    @classmethod
    async def delete_request(cls, db: Database, request_id: str) -> bool:
        """Delete a request by id; ``True`` if a record was removed."""
        result = await db.requests.delete_one({"_id": parse_object_id(request_id)})
        if result.deleted_count:
            logger.info("Deleted blood request %s", request_id)
        return result.deleted_count > 0
