"""
Main entrypoint for the Address Book API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly, e.g.::

    uvicorn address_book_api.app.main:app --port 8282

Each application owns exactly one ``AddressBook``.  Pass one to
``create_app`` to start from existing contacts (tests do this);
otherwise an empty book is created.  Routes reach the book through
``app.state``, never through module globals.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.address_book import AddressBook


def create_app(address_book: Optional[AddressBook] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    address_book : Optional[AddressBook]
        Store to serve.  A new, empty one rooted at the configured
        person path is used when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    if address_book is None:
        address_book = AddressBook(base_path=settings.person_base_path)
    app.state.address_book = address_book

    # Payloads the schemas cannot parse are plain bad requests for
    # this API rather than FastAPI's default 422.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("Address book ready with %d contact(s)", len(address_book))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
