"""
Endpoint subpackage.

Each module defines an APIRouter for one collection (donors,
inventory, requests).  The routers are aggregated in ``router.py``.
"""
