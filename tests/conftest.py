from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from address_book_api.app.main import create_app
from address_book_api.app.services.address_book import AddressBook, Person


@pytest.fixture()
def book():
    return AddressBook()


@pytest.fixture()
def seeded_book():
    """Two contacts, ``1: Salvador`` and ``2: Juan``."""
    return AddressBook([Person(1, "Salvador"), Person(2, "Juan")])


@pytest.fixture()
def client(book):
    with TestClient(create_app(book)) as test_client:
        yield test_client


@pytest.fixture()
def seeded_client(seeded_book):
    with TestClient(create_app(seeded_book)) as test_client:
        yield test_client
