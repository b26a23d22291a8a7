"""
Service layer for the blood inventory.

Recording a unit has one side effect: the referenced donor's
``lastDonation`` is set to the unit's collection date.  The two writes
are independent (there is no multi-document transaction), so the
outcome of the donor update is returned alongside the stored unit
instead of being discarded.  A failed donor update never undoes the
unit insert.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from blood_bank_api.app.core.db import Database, parse_object_id
from blood_bank_api.app.schemas.inventory import (
    BLOOD_UNIT_SHELF_LIFE,
    InventoryCreate,
    InventoryRead,
    InventoryUnit,
)

logger = logging.getLogger(__name__)


@dataclass
class InventoryCreateResult:
    """Stored unit plus the outcome of the donor side update."""

    unit: InventoryRead
    donor_updated: bool
    donor_message: Optional[str] = None


class InventoryService:
    """Service class for managing blood units."""

    @staticmethod
    def compute_expiry(collection_date: datetime) -> datetime:
        """Return the expiry date of a unit collected at ``collection_date``."""
        return collection_date + BLOOD_UNIT_SHELF_LIFE

    @classmethod
    async def list_units(cls, db: Database) -> List[InventoryRead]:
        """Return every unit ordered by ``createdAt`` descending."""
        cursor = db.inventory.find().sort("createdAt", DESCENDING)
        units: List[InventoryRead] = []
        async for document in cursor:
            units.append(InventoryRead.from_document(document))
        return units

    @classmethod
    async def create_unit(cls, db: Database, data: InventoryCreate) -> InventoryCreateResult:
        """Store a new unit and refresh the donor's last donation date."""
        unit = InventoryUnit(
            blood_type=data.blood_type,
            donor_id=data.donor_id,
            collection_date=data.collection_date,
            expiry_date=cls.compute_expiry(data.collection_date),
        )
        document = unit.to_document()
        result = await db.inventory.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info("Recorded blood unit %s from donor %s", result.inserted_id, data.donor_id)

        donor_updated, message = await cls._touch_donor(db, data.donor_id, data.collection_date)
        return InventoryCreateResult(
            unit=InventoryRead.from_document(document),
            donor_updated=donor_updated,
            donor_message=message,
        )

    @classmethod
    async def _touch_donor(cls, db: Database, donor_id: str, collection_date: datetime):
        """Set ``lastDonation`` on the donor; return ``(updated, reason)``."""
        try:
            result = await db.donors.update_one(
                {"_id": parse_object_id(donor_id)},
                {"$set": {"lastDonation": collection_date}},
            )
        except (ValueError, PyMongoError) as e:
            logger.warning("Could not update last donation of donor %s: %s", donor_id, e)
            return False, str(e)
        if not result.matched_count:
            logger.warning("Blood unit references unknown donor %s", donor_id)
            return False, "Donor not found"
        return True, None

    @classmethod
    async def delete_unit(cls, db: Database, unit_id: str) -> bool:
        """Delete a unit by id; ``True`` if a record was removed."""
        result = await db.inventory.delete_one({"_id": parse_object_id(unit_id)})
        if result.deleted_count:
            logger.info("Deleted blood unit %s", unit_id)
        return result.deleted_count > 0
