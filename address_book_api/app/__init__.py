"""
Application package initializer.

``main`` assembles the FastAPI app; ``core`` holds configuration and
logging, ``schemas`` the request/response models, ``services`` the
contact store and resource handler, and ``api`` the versioned routes.
"""

from .main import app, create_app  # noqa: F401
