"""
Service layer for blood donors.

Provides the list, create, lookup and delete operations on the
``donors`` collection.  Donors are listed newest first.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pymongo import DESCENDING

from blood_bank_api.app.core.db import Database, parse_object_id
from blood_bank_api.app.schemas.donor import DonorCreate, DonorRead

logger = logging.getLogger(__name__)


class DonorService:
    """Service class for managing donors."""

    @classmethod
    async def list_donors(cls, db: Database) -> List[DonorRead]:
        """Return every donor ordered by ``createdAt`` descending."""
        cursor = db.donors.find().sort("createdAt", DESCENDING)
        donors: List[DonorRead] = []
        async for document in cursor:
            donors.append(DonorRead.from_document(document))
        return donors

    @classmethod
    async def create_donor(cls, db: Database, data: DonorCreate) -> DonorRead:
        """Insert a donor and return the stored record with its id."""
        document = data.to_document()
        result = await db.donors.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info("Created donor %s", result.inserted_id)
        return DonorRead.from_document(document)

    @classmethod
    async def get_donor(cls, db: Database, donor_id: str) -> Optional[DonorRead]:
        """Retrieve a single donor by id, or ``None`` if absent."""
        document = await db.donors.find_one({"_id": parse_object_id(donor_id)})
        if document is None:
            return None
        return DonorRead.from_document(document)

    @classmethod
    async def delete_donor(cls, db: Database, donor_id: str) -> bool:
        """Delete a donor by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        result = await db.donors.delete_one({"_id": parse_object_id(donor_id)})
        if result.deleted_count:
            logger.info("Deleted donor %s", donor_id)
        return result.deleted_count > 0
