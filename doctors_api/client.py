"""Doctor Record Service API client.

This module defines a small synchronous client around the service's
REST API.  It uses the ``requests`` library internally and exposes one
method per endpoint:

* :meth:`DoctorsClient.list_doctors` – return every doctor.
* :meth:`DoctorsClient.get_doctor` – fetch a single doctor by id.
* :meth:`DoctorsClient.create_doctor` – add a doctor.
* :meth:`DoctorsClient.update_doctor` – replace a doctor's fields.
* :meth:`DoctorsClient.delete_doctor` – remove a doctor.

Every method returns a tuple ``(data, error)``.  Response envelopes are
unwrapped so callers receive the rows themselves.  Failures are never
raised: ``error`` is a dictionary with keys ``status_code`` and
``message`` describing the issue.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DOCTORS_PATH = "/api/doctors"


class DoctorsClient:
    """Client for interacting with the Doctor Record Service."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``. On failure, ``data`` is ``None`` and ``error`` is
            a dictionary with keys ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
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
    def _unwrap(data: Any, key: str) -> Any:
        if isinstance(data, dict):
            return (data.get("data") or {}).get(key)
        return None

    # ------------------------------------------------------------------
    # Doctor operations
    # ------------------------------------------------------------------
    def list_doctors(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", DOCTORS_PATH)
        if error:
            return [], error
        return self._unwrap(data, "doctors") or [], None

    def get_doctor(self, doctor_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single doctor.  ``data`` is ``None`` if no row matched."""
        data, error = self._request("GET", f"{DOCTORS_PATH}/{doctor_id}")
        if error:
            return None, error
        return self._unwrap(data, "doctor"), None

    def create_doctor(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a doctor from ``{name, city, specialty}``."""
        data, error = self._request("POST", DOCTORS_PATH, json_body=payload)
        if error:
            return None, error
        return self._unwrap(data, "doctor"), None

    def update_doctor(
        self, doctor_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("PUT", f"{DOCTORS_PATH}/{doctor_id}", json_body=payload)
        if error:
            return None, error
        return self._unwrap(data, "doctor"), None

    def delete_doctor(self, doctor_id: Any) -> Tuple[bool, Optional[Dict[str, Any]]]:
        _, error = self._request("DELETE", f"{DOCTORS_PATH}/{doctor_id}")
        if error:
            return False, error
        return True, None
