"""
Top-level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.  The
contacts router is mounted at the configured collection path
(``/contacts`` by default).
"""

from fastapi import APIRouter

from address_book_api.app.core.config import settings
from .endpoints import contacts

router = APIRouter()

router.include_router(contacts.router, prefix=settings.contacts_path, tags=["contacts"])
