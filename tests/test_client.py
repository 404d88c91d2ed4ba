"""
Tests for the requests-based client, against a stub session.
"""
from __future__ import annotations

import json

import requests

from address_book_client import AddressBookAPI


def _response(status_code, payload=None):
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    response._content = json.dumps(payload).encode() if payload is not None else b""
    return response


class StubSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, json))
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def _api(*responses):
    session = StubSession(*responses)
    return AddressBookAPI(base_url="http://localhost:8282/", session=session), session


def test_create_contact_posts_name():
    person = {"id": 1, "name": "Juan", "href": "/contacts/person/1"}
    api, session = _api(_response(201, person))

    data, error = api.create_contact("Juan")

    assert error is None
    assert data == person
    assert session.calls == [("POST", "http://localhost:8282/contacts", {"name": "Juan"})]


def test_list_contacts_unwraps_person_list():
    persons = [{"id": 1, "name": "Juan", "href": "/contacts/person/1"}]
    api, session = _api(_response(200, {"nextId": 2, "personList": persons}))

    data, error = api.list_contacts()

    assert (data, error) == (persons, None)
    assert session.calls[0][:2] == ("GET", "http://localhost:8282/contacts")


def test_get_missing_contact_reports_error():
    api, session = _api(_response(404, {"detail": "Person 3 not found"}))

    data, error = api.get_contact(3)

    assert data is None
    assert error == {"status_code": 404, "message": "Person 3 not found"}
    assert session.calls[0][1] == "http://localhost:8282/contacts/person/3"


def test_update_unknown_contact_reports_bad_request():
    api, session = _api(_response(400, {"detail": "Person 3 not found"}))

    data, error = api.update_contact(3, "Maria")

    assert data is None
    assert error["status_code"] == 400
    assert session.calls == [("PUT", "http://localhost:8282/contacts/person/3", {"name": "Maria"})]


def test_delete_contact_success_and_repeat():
    api, _ = _api(_response(204), _response(404, {"detail": "Person 2 not found"}))

    assert api.delete_contact(2) == (True, None)
    ok, error = api.delete_contact(2)
    assert ok is False
    assert error["status_code"] == 404


def test_connection_errors_are_returned_not_raised():
    api, _ = _api(requests.ConnectionError("refused"))

    data, error = api.list_contacts()

    assert data == []
    assert error == {"status_code": None, "message": "refused"}
