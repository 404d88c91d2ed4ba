"""
Resource handler for the contacts collection.

``ContactService`` maps the five uniform verbs (list, create, fetch,
replace, remove) onto an ``AddressBook`` and returns an ``Outcome``
describing the result: its kind, the payload to send back and, for
creations, the location of the new resource.  Expected failures are
outcomes too, never exceptions, so API handlers only need to translate
an outcome into a response.

Method semantics preserved here:

* list and fetch are safe and idempotent;
* create is neither safe nor idempotent, every call yields a new id;
* replace and remove write, but repeating them changes nothing more.
  A replace aimed at an unknown id is a client error (``BAD_REQUEST``),
  never an implicit creation.  A remove of a missing id, whether it
  never existed or was already removed, is ``NOT_FOUND``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from address_book_api.app.schemas.person import AddressBookRead, PersonCreate, PersonRead
from address_book_api.app.services.address_book import AddressBook, NotFound, Person


class OutcomeKind(enum.Enum):
    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    NOT_FOUND = 404

    @property
    def status_code(self) -> int:
        return self.value

    @property
    def is_success(self) -> bool:
        return self.value < 400


@dataclass(frozen=True)
class Outcome:
    """Result of a resource operation."""

    kind: OutcomeKind
    body: Optional[Union[PersonRead, AddressBookRead]] = None
    location: Optional[str] = None
    detail: Optional[str] = None


class ContactService:
    """Uniform resource operations on top of an ``AddressBook``."""

    def __init__(self, book: AddressBook) -> None:
        self.book = book

    def list_contacts(self) -> Outcome:
        persons, next_id = self.book.snapshot()
        return Outcome(
            OutcomeKind.OK,
            body=AddressBookRead(next_id=next_id, person_list=[self._to_read(p) for p in persons]),
        )

    def create_contact(self, data: PersonCreate) -> Outcome:
        person = self.book.create(data.name)
        body = self._to_read(person)
        return Outcome(OutcomeKind.CREATED, body=body, location=body.href)

    def get_contact(self, person_id: int) -> Outcome:
        result = self.book.get(person_id)
        if isinstance(result, NotFound):
            return self._missing(OutcomeKind.NOT_FOUND, result)
        return Outcome(OutcomeKind.OK, body=self._to_read(result))

    def replace_contact(self, person_id: int, data: PersonCreate) -> Outcome:
        result = self.book.replace(person_id, data.name)
        if isinstance(result, NotFound):
            return self._missing(OutcomeKind.BAD_REQUEST, result)
        return Outcome(OutcomeKind.OK, body=self._to_read(result))

    def delete_contact(self, person_id: int) -> Outcome:
        result = self.book.delete(person_id)
        if isinstance(result, NotFound):
            return self._missing(OutcomeKind.NOT_FOUND, result)
        return Outcome(OutcomeKind.NO_CONTENT)

    def _to_read(self, person: Person) -> PersonRead:
        return PersonRead(id=person.id, name=person.name, href=self.book.href(person.id))

    @staticmethod
    def _missing(kind: OutcomeKind, result: NotFound) -> Outcome:
        return Outcome(kind, detail=f"Person {result.person_id} not found")
