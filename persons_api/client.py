"""Persons API client.

A thin wrapper around the REST API served by :mod:`persons_api.app`.
It uses the ``requests`` library and never raises on HTTP or network
failures: every method returns a ``(result, error)`` tuple where
``error`` is ``None`` on success, or a dictionary with the keys
``status_code`` and ``message`` describing the failure.

* :meth:`PersonsAPI.list_persons` – return all persons.
* :meth:`PersonsAPI.get_person` – fetch a single person by identifier.
* :meth:`PersonsAPI.add_person` – create a person.
* :meth:`PersonsAPI.update_person` – replace name, age and date of a person.
* :meth:`PersonsAPI.delete_person` – remove a person.
* :meth:`PersonsAPI.health` – check that the service is up.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PersonsAPI:
    """Client for interacting with the Persons API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``. On failure, ``data`` is ``None`` and ``error``
            describes the issue.
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
            if not response.content:
                return None, None
            if response.headers.get("content-type", "").startswith("application/json"):
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
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

    # ------------------------------------------------------------------
    # Person operations
    # ------------------------------------------------------------------
    def list_persons(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/api/persons")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_person(self, person_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/person/{person_id}")

    def add_person(self, person: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Create a person.

        Args:
            person: Mapping with the keys ``id``, ``name``, ``age`` and
                ``date`` (ISO‑8601 string).
        Returns:
            A tuple ``(created, error)``.
        """
        _, error = self._request("POST", "/api/person", json_body=person)
        return error is None, error

    def update_person(self, person: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("PUT", "/api/person", json_body=person)
        return error is None, error

    def delete_person(self, person_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/api/person/{person_id}")
        return error is None, error

    def health(self) -> bool:
        data, error = self._request("GET", "/health")
        return error is None and data == "OK"
