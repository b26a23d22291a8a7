"""
Health endpoint.

Reports whether the database answered at startup.  The service keeps
running without a database, so this is the quickest way to tell.
"""

from fastapi import APIRouter, Depends

from blood_bank_api.app.core.db import Database, get_database

router = APIRouter()


@router.get("")
async def health(db: Database = Depends(get_database)) -> dict:
    return {"success": True, "database": "connected" if db.connected else "disconnected"}
