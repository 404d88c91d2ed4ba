"""
In-memory contact store.

The ``AddressBook`` owns the ordered list of persons and the counter
used to hand out ids.  Both live behind a single lock: every operation,
reads included, runs while holding it, so concurrent requests can never
observe a half-applied change or receive the same id twice.

Ids are never reused.  The counter only moves forward, including past
ids that are later deleted, so a person's ``href`` stays valid for as
long as the person exists and never points at someone else afterwards.

Lookups that miss return a ``NotFound`` value instead of raising or
returning ``None``; callers branch on the type of the result.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace as dataclass_replace
from typing import Iterable, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_BASE_PATH = "/contacts/person"


@dataclass(frozen=True)
class Person:
    """A stored contact.  Immutable; updates produce a new instance."""

    id: int
    name: str


@dataclass(frozen=True)
class NotFound:
    """No person with ``person_id`` exists in the store."""

    person_id: int


@dataclass(frozen=True)
class Deleted:
    """The person with ``person_id`` was removed."""

    person_id: int


def person_href(base_path: str, person_id: int) -> str:
    """Build the self locator of a person from its id."""
    return f"{base_path.rstrip('/')}/{person_id}"


class AddressBook:
    """Thread-safe ordered collection of persons.

    Parameters
    ----------
    persons : Iterable[Person], optional
        Initial contents, kept in the given order.  Ids must be positive
        and unique; the counter is moved past the largest one.
    base_path : str
        Collection path every ``href`` is derived from.
    """

    def __init__(self, persons: Iterable[Person] = (), base_path: str = DEFAULT_BASE_PATH) -> None:
        self.base_path = base_path.rstrip("/")
        self._lock = threading.Lock()
        self._persons: List[Person] = []
        self._next_id = 1
        seen = set()
        for person in persons:
            if person.id < 1:
                raise ValueError(f"Person id must be positive, got {person.id}")
            if person.id in seen:
                raise ValueError(f"Duplicate person id {person.id}")
            seen.add(person.id)
            self._persons.append(person)
            self._next_id = max(self._next_id, person.id + 1)

    def __len__(self) -> int:
        with self._lock:
            return len(self._persons)

    @property
    def next_id(self) -> int:
        """Id the next ``create`` will assign (without reserving it)."""
        with self._lock:
            return self._next_id

    def allocate_id(self) -> int:
        """Reserve and return a fresh id without storing a person."""
        with self._lock:
            return self._take_id()

    def href(self, person_id: int) -> str:
        return person_href(self.base_path, person_id)

    # ------------------------------------------------------------------
    # CRUD operations
    # ------------------------------------------------------------------
    def list(self) -> List[Person]:
        """Return a snapshot of all persons in insertion order."""
        with self._lock:
            return list(self._persons)

    def snapshot(self) -> Tuple[List[Person], int]:
        """Return the persons and the counter as of a single instant."""
        with self._lock:
            return list(self._persons), self._next_id

    def create(self, name: str) -> Person:
        """Store a new person under a fresh id and return it.

        Any name is accepted, including empty strings and names already
        present in the book.
        """
        with self._lock:
            person = Person(id=self._take_id(), name=name)
            self._persons.append(person)
        logger.info("Created person %s", person.id)
        return person

    def get(self, person_id: int) -> Union[Person, NotFound]:
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                logger.debug("Person %s not found", person_id)
                return NotFound(person_id)
            return self._persons[index]

    def replace(self, person_id: int, name: str) -> Union[Person, NotFound]:
        """Overwrite the name of an existing person.

        The person keeps its id and position.  Unknown ids are reported
        as ``NotFound``; nothing is ever created here.
        """
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                logger.debug("Cannot replace person %s: not found", person_id)
                return NotFound(person_id)
            person = dataclass_replace(self._persons[index], name=name)
            self._persons[index] = person
        logger.info("Replaced person %s", person_id)
        return person

    def delete(self, person_id: int) -> Union[Deleted, NotFound]:
        with self._lock:
            index = self._index_of(person_id)
            if index is None:
                logger.debug("Cannot delete person %s: not found", person_id)
                return NotFound(person_id)
            del self._persons[index]
        logger.info("Deleted person %s", person_id)
        return Deleted(person_id)

    # ------------------------------------------------------------------
    # Helpers (caller must hold the lock)
    # ------------------------------------------------------------------
    def _take_id(self) -> int:
        person_id = self._next_id
        self._next_id += 1
        return person_id

    def _index_of(self, person_id: int) -> Optional[int]:
        for index, person in enumerate(self._persons):
            if person.id == person_id:
                return index
        return None
