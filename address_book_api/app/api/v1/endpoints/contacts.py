"""
Contact endpoints for API v1.

These routes expose the address book as a REST resource:

* ``GET /contacts`` lists every contact;
* ``POST /contacts`` creates one and answers ``201`` with a
  ``Location`` header pointing at it;
* ``GET``, ``PUT`` and ``DELETE /contacts/person/{person_id}`` fetch,
  replace and remove a single contact.

Handlers stay thin: each one calls ``ContactService`` and turns the
returned outcome into a response, raising ``HTTPException`` for the
failure outcomes.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from address_book_api.app.schemas.person import AddressBookRead, PersonCreate, PersonRead
from address_book_api.app.services.contact_service import ContactService, Outcome

router = APIRouter()


def get_contact_service(request: Request) -> ContactService:
    """Build the service around the address book owned by the app."""
    return ContactService(request.app.state.address_book)


def _unwrap(outcome: Outcome):
    if not outcome.kind.is_success:
        raise HTTPException(status_code=outcome.kind.status_code, detail=outcome.detail)
    return outcome.body


@router.get("", response_model=AddressBookRead)
async def list_contacts(service: ContactService = Depends(get_contact_service)) -> AddressBookRead:
    """Return the whole address book in creation order."""
    return _unwrap(service.list_contacts())


@router.post("", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
async def create_contact(
    person_in: PersonCreate,
    response: Response,
    service: ContactService = Depends(get_contact_service),
) -> PersonRead:
    """Create a new contact.

    Every call creates a distinct contact, even when the payload is
    identical to an earlier one.  The ``Location`` header carries the
    ``href`` of the new contact.
    """
    outcome = service.create_contact(person_in)
    response.headers["Location"] = outcome.location
    return _unwrap(outcome)


@router.get("/person/{person_id}", response_model=PersonRead)
async def get_contact(
    person_id: int,
    service: ContactService = Depends(get_contact_service),
) -> PersonRead:
    """Retrieve a single contact.  Returns HTTP 404 if it does not exist."""
    return _unwrap(service.get_contact(person_id))


@router.put("/person/{person_id}", response_model=PersonRead)
async def replace_contact(
    person_id: int,
    person_in: PersonCreate,
    service: ContactService = Depends(get_contact_service),
) -> PersonRead:
    """Replace the name of an existing contact.

    Only existing contacts can be replaced; an unknown id answers
    HTTP 400 and nothing is created.
    """
    return _unwrap(service.replace_contact(person_id, person_in))


@router.delete("/person/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    person_id: int,
    service: ContactService = Depends(get_contact_service),
) -> None:
    """Delete a contact.  Returns HTTP 404 if it does not exist (anymore)."""
    _unwrap(service.delete_contact(person_id))
    return None
