"""
Pydantic models for contact data.

``PersonCreate`` is the request body for both creating and replacing a
contact; only ``name`` is read from it, any ``id`` or ``href`` sent by
the client is ignored because the server owns both.  ``PersonRead`` is
what the API returns, and ``AddressBookRead`` wraps the whole
collection using the original camel-case field names (``nextId``,
``personList``).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PersonCreate(BaseModel):
    """Schema for creating or replacing a contact."""

    name: str = Field(..., examples=["Juan"])

    model_config = ConfigDict(extra="ignore")


class PersonRead(BaseModel):
    """Schema for reading a contact from the API."""

    id: int
    name: str
    href: str = Field(..., examples=["/contacts/person/1"])

    model_config = ConfigDict(from_attributes=True)


class AddressBookRead(BaseModel):
    """Schema for the full collection of contacts."""

    next_id: int = Field(..., alias="nextId")
    person_list: List[PersonRead] = Field(default_factory=list, alias="personList")

    model_config = ConfigDict(populate_by_name=True)
