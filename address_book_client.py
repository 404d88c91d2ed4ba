"""Address book API client.

A thin wrapper around the contacts REST API using the ``requests``
library.  It exposes one method per resource operation:

* :meth:`AddressBookAPI.list_contacts` – the whole address book.
* :meth:`AddressBookAPI.create_contact` – add a contact.
* :meth:`AddressBookAPI.get_contact` – fetch one contact by id.
* :meth:`AddressBookAPI.update_contact` – replace a contact's name.
* :meth:`AddressBookAPI.delete_contact` – remove a contact.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` and ``message`` keys.  The client never raises for
HTTP or connection errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class AddressBookAPI:
    """Client for the address book service."""

    def __init__(
        self,
        *,
        base_url: str,
        contacts_path: str = "/contacts",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:8282``.
            contacts_path: Path of the contacts collection.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.contacts_path = contacts_path.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            body, or ``None`` when the response has no content.
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
                    message = str(err_json.get("detail") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _person_path(self, person_id: Any) -> str:
        return f"{self.contacts_path}/person/{person_id}"

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def list_contacts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every contact, in creation order."""
        data, error = self._request("GET", self.contacts_path)
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get("personList"), list):
            return data["personList"], None
        return [], None

    def create_contact(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a contact and return it with its assigned ``id`` and ``href``."""
        return self._request("POST", self.contacts_path, json_body={"name": name})

    def get_contact(self, person_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._person_path(person_id))

    def update_contact(self, person_id: Any, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the name of an existing contact.

        The server answers 400 for unknown ids; that comes back as the
        ``error`` element.
        """
        return self._request("PUT", self._person_path(person_id), json_body={"name": name})

    def delete_contact(self, person_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a contact.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._person_path(person_id))
        if error:
            return False, error
        return True, None
