"""Blood Bank API client.

This module defines a small client wrapper around the Blood Bank HTTP
API.  It uses the ``requests`` library internally and mirrors the
server's resources:

* donors: :meth:`BloodBankAPI.list_donors`, :meth:`BloodBankAPI.create_donor`,
  :meth:`BloodBankAPI.delete_donor`
* inventory: :meth:`BloodBankAPI.list_inventory`,
  :meth:`BloodBankAPI.add_blood_unit`, :meth:`BloodBankAPI.delete_blood_unit`
* requests: :meth:`BloodBankAPI.list_requests`,
  :meth:`BloodBankAPI.create_request`, :meth:`BloodBankAPI.update_request`,
  :meth:`BloodBankAPI.update_request_status`, :meth:`BloodBankAPI.delete_request`

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with ``status_code`` and ``message`` taken from the server's
``{success: false, message}`` envelope.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple, Union

import requests

logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class BloodBankAPI:
    """Client for the blood bank API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.  The
                ``/api`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request against ``/api{path}``.

        Returns a tuple ``(data, error)`` as described in the module
        docstring.
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("message", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _unwrap(result: Result, key: str) -> Result:
        # Pull ``key`` out of a ``{success, <key>}`` envelope.
        data, error = result
        if error is not None:
            return None, error
        return (data or {}).get(key), None

    # ------------------------------------------------------------------
    # Donors
    # ------------------------------------------------------------------
    def list_donors(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Dict[str, Any]]]:
        return self._request("GET", "/donors")

    def create_donor(
        self, *, name: str, blood_type: str, phone: str, email: str, address: str
    ) -> Result:
        """Register a donor; returns the stored donor record."""
        payload = {
            "name": name,
            "bloodType": blood_type,
            "phone": phone,
            "email": email,
            "address": address,
        }
        return self._unwrap(self._request("POST", "/donors", json_body=payload), "donor")

    def delete_donor(self, donor_id: str) -> Result:
        return self._request("DELETE", f"/donors/{donor_id}")

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------
    def list_inventory(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Dict[str, Any]]]:
        return self._request("GET", "/inventory")

    def add_blood_unit(
        self, *, blood_type: str, donor_id: str, collection_date: Union[date, datetime, str]
    ) -> Result:
        """Record a collected unit.

        Returns the whole envelope so callers can inspect
        ``donorUpdated`` as well as ``bloodUnit``.
        """
        if isinstance(collection_date, (date, datetime)):
            collection_date = collection_date.isoformat()
        payload = {"bloodType": blood_type, "donorId": donor_id, "collectionDate": collection_date}
        return self._request("POST", "/inventory", json_body=payload)

    def delete_blood_unit(self, unit_id: str) -> Result:
        return self._request("DELETE", f"/inventory/{unit_id}")

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def list_requests(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Dict[str, Any]]]:
        return self._request("GET", "/requests")

    def create_request(
        self,
        *,
        patient_name: str,
        blood_type: str,
        units_needed: int,
        priority: str,
        hospital: str,
    ) -> Result:
        payload = {
            "patientName": patient_name,
            "bloodType": blood_type,
            "unitsNeeded": units_needed,
            "priority": priority,
            "hospital": hospital,
        }
        return self._unwrap(self._request("POST", "/requests", json_body=payload), "request")

    def update_request(self, request_id: str, fields: Dict[str, Any]) -> Result:
        """Update a request with camelCase ``fields``.

        ``data`` is ``None`` if no request has this id.
        """
        return self._unwrap(self._request("PUT", f"/requests/{request_id}", json_body=fields), "request")

    def update_request_status(self, request_id: str, status: str) -> Result:
        return self.update_request(request_id, {"status": status})

    def delete_request(self, request_id: str) -> Result:
        return self._request("DELETE", f"/requests/{request_id}")

    def health(self) -> Result:
        return self._request("GET", "/health")
